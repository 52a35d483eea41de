# swiftline/application/services/_http_fetch_service.py

"""HTTP fetch service: one GET request, rendered inline or saved to a file.

Validation of the URL and headers happens before the session is touched, so
bad input never causes network activity. The timeout bounds the whole
request, including reading the body.
"""

# Standard library imports
from collections.abc import Iterable
from collections.abc import Iterator
from email.message import Message
from logging import getLogger
from pathlib import Path
from time import monotonic

# Third party imports
import requests
from rich.console import Console

# Local imports
from swiftline.application.processing.json_parser import StrictJsonStrategy
from swiftline.core.domain.errors import IoError
from swiftline.core.domain.errors import NetworkError
from swiftline.core.domain.errors import ResponseParseError
from swiftline.core.domain.fetch_outcome import DisplayedResponse
from swiftline.core.domain.fetch_outcome import FetchOutcome
from swiftline.core.domain.fetch_outcome import SavedDownload
from swiftline.infrastructure.config import ConfigLoader
from swiftline.infrastructure.config import get_config
from swiftline.infrastructure.http import build_session
from swiftline.infrastructure.http import flatten_headers
from swiftline.infrastructure.http import parse_headers
from swiftline.infrastructure.http import validate_url
from swiftline.infrastructure.logging import ProgressDisplay
from swiftline.shared.utils.style import ok
from swiftline.shared.utils.style import print_json
from swiftline.shared.utils.style import print_text
from swiftline.shared.utils.style import status_line
from swiftline.shared.utils.style import stdout_console

logger = getLogger(__name__)


def decode_body(content: bytes, content_type: str) -> str:
    """Decode a response body with its declared charset, UTF-8 if none

    requests assumes ISO-8859-1 for ``text/*`` without a charset; the body is
    treated as UTF-8 instead. Undecodable bytes are replaced, never fatal.
    """
    message = Message()
    message["Content-Type"] = content_type
    charset = message.get_content_charset() or "utf-8"
    try:
        return content.decode(charset, errors="replace")
    except LookupError:
        logger.debug(f"Unknown charset {charset!r}, decoding as UTF-8")
        return content.decode("utf-8", errors="replace")


def _content_length(response: requests.Response) -> int | None:
    raw = response.headers.get("Content-Length")
    if raw is None:
        return None
    try:
        length = int(raw)
    except ValueError:
        logger.debug(f"Ignoring unparsable Content-Length: {raw!r}")
        return None
    return length if length >= 0 else None


class _Deadline:
    """Overall time limit for one request"""

    __slots__ = ("timeout", "_expires_at")

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        self._expires_at = monotonic() + timeout

    def check(self) -> None:
        if monotonic() > self._expires_at:
            raise NetworkError(f"Request timed out after {self.timeout:g}s")


class HttpFetchService:
    """Application service for the ``http get`` command"""

    __slots__ = ("_config", "_session", "_progress", "_console")

    def __init__(
        self,
        config: ConfigLoader | None = None,
        session: requests.Session | None = None,
        progress: ProgressDisplay | None = None,
        console: Console | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Configuration loader, uses default if None
            session: Transport to send the request with, a new requests session if None
            progress: Progress display, auto-detected from stderr if None
            console: Output console, current stdout if None
        """
        self._config = config or get_config()
        self._session = session
        self._progress = progress or ProgressDisplay()
        self._console = console

    @property
    def session(self) -> requests.Session:
        """Session used for the request, created on first use"""
        if self._session is None:
            self._session = build_session(self._config.http.user_agent)
        return self._session

    def fetch(
        self,
        url: str,
        headers: Iterable[str] = (),
        timeout: float | None = None,
        save: str | Path | None = None,
        pretty: bool = False,
    ) -> FetchOutcome:
        """Perform a GET and either print the response or save its body

        Args:
            url: Absolute http(s) URL
            headers: Raw ``key:value`` strings, repeated names are kept
            timeout: Total seconds allowed, configured default if None
            save: Stream the body to this path instead of printing it
            pretty: Pretty-print JSON responses

        Returns:
            DisplayedResponse or SavedDownload

        Raises:
            InvalidUrl: If url is not an absolute http(s) URL
            InvalidHeader: If a header entry is malformed
            NetworkError: On connection, TLS, DNS, timeout or stream failures
            IoError: If the save file cannot be created or written
            ResponseParseError: If a JSON response body does not parse
        """
        target = validate_url(url)
        header_map = parse_headers(headers)
        if timeout is None:
            timeout = self._config.http.timeout
        deadline = _Deadline(timeout)

        logger.info(f"GET {target}")
        logger.debug(f"Request headers: {header_map}")

        try:
            with self._progress.spinner("Requesting..."):
                response = self.session.get(
                    target,
                    headers=flatten_headers(header_map),
                    timeout=timeout,
                    stream=True,
                )
        except requests.RequestException as e:
            raise NetworkError(f"Network error while sending request: {e}") from e

        try:
            deadline.check()
            logger.info(f"Response: {response.status_code} {response.reason}")
            if save is not None:
                return self._save(response, Path(save), deadline)
            return self._display(response, pretty, deadline)
        finally:
            response.close()

    def _iter_chunks(self, response: requests.Response) -> Iterator[bytes]:
        chunks = response.iter_content(chunk_size=self._config.http.chunk_size)
        while True:
            try:
                chunk = next(chunks)
            except StopIteration:
                return
            except requests.RequestException as e:
                raise NetworkError(f"Error reading response stream: {e}") from e
            if chunk:
                yield chunk

    def _save(
        self, response: requests.Response, path: Path, deadline: _Deadline
    ) -> SavedDownload:
        """Stream the body to path in arrival order, removing it if incomplete"""
        total = _content_length(response)
        bytes_written = 0

        try:
            handle = path.open("wb")
        except OSError as e:
            raise IoError(f"Cannot create file: {path}: {e.strerror or e}", path=str(path)) from e

        completed = False
        try:
            with handle, self._progress.download(total) as advance:
                for chunk in self._iter_chunks(response):
                    deadline.check()
                    try:
                        handle.write(chunk)
                    except OSError as e:
                        raise IoError(
                            f"Cannot write file: {path}: {e.strerror or e}", path=str(path)
                        ) from e
                    bytes_written += len(chunk)
                    advance(len(chunk))
            completed = True
        finally:
            if not completed:
                self._discard_partial(path)

        logger.debug(f"Wrote {bytes_written:,} bytes to {path}")

        console = self._console or stdout_console()
        status_line(response.status_code, response.reason or "", console=console)
        ok(f"Saved to: {path}", console=console)

        return SavedDownload(
            status_code=response.status_code,
            reason=response.reason or "",
            path=str(path),
            bytes_written=bytes_written,
            content_length=total,
        )

    @staticmethod
    def _discard_partial(path: Path) -> None:
        logger.warning(f"Download incomplete, removing {path}")
        try:
            path.unlink(missing_ok=True)
        except OSError as e:
            logger.error(f"Could not remove partial download {path}: {e}")

    def _read_body(self, response: requests.Response, deadline: _Deadline) -> bytes:
        """Buffer the body chunk by chunk so the deadline can cut off a slow stream"""
        body = bytearray()
        for chunk in self._iter_chunks(response):
            deadline.check()
            body.extend(chunk)
        logger.debug(f"Read {len(body):,} bytes of response body")
        return bytes(body)

    def _display(
        self, response: requests.Response, pretty: bool, deadline: _Deadline
    ) -> DisplayedResponse:
        """Buffer the body and print it, as pretty JSON when asked and possible"""
        content = self._read_body(response, deadline)

        content_type = response.headers.get("Content-Type", "")
        console = self._console or stdout_console()
        reason = response.reason or ""
        text = decode_body(content, content_type)

        if pretty and "application/json" in content_type.lower():
            try:
                body = StrictJsonStrategy().parse(text.removeprefix("\ufeff"))
            except ValueError as e:
                raise ResponseParseError(response.status_code, str(e)) from e

            status_line(response.status_code, reason, console=console)
            print_json(body, indent=self._config.json_select.indent, console=console)
            return DisplayedResponse(
                status_code=response.status_code,
                reason=reason,
                content_type=content_type,
                json_body=body,
                is_json=True,
            )

        status_line(response.status_code, reason, console=console)
        print_text(text, console=console)
        return DisplayedResponse(
            status_code=response.status_code,
            reason=reason,
            content_type=content_type,
            text=text,
        )
