# swiftline/core/domain/errors.py

"""Error kinds raised by swiftline operations

Every error is fatal to the invocation. The CLI reports the message once on
stderr and exits non-zero.
"""


class SwiftlineError(Exception):
    """Base class for all errors reported by the CLI"""


class IoError(SwiftlineError):
    """A file, stdin or stdout access failed"""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ParseError(SwiftlineError):
    """JSON text is malformed under the active grammar"""


class InvalidUrl(SwiftlineError):
    """URL did not parse as an absolute http(s) URL"""

    def __init__(self, url: str, reason: str | None = None) -> None:
        message = f"Invalid URL: {url}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.url = url


class InvalidHeader(SwiftlineError):
    """A raw header entry could not be turned into a name/value pair"""

    def __init__(self, message: str, header: str) -> None:
        super().__init__(message)
        self.header = header


class NetworkError(SwiftlineError):
    """Transport level failure: DNS, connect, TLS, timeout or stream read"""


class ResponseParseError(SwiftlineError):
    """Response claimed to be JSON but its body did not parse"""

    def __init__(self, status_code: int, detail: str) -> None:
        super().__init__(f"Failed to parse JSON (status {status_code}): {detail}")
        self.status_code = status_code
