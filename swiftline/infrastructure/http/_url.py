# swiftline/infrastructure/http/_url.py

"""URL validation done before any network activity"""

# Standard library imports
from urllib.parse import urlsplit

# Local imports
from swiftline.core.domain.errors import InvalidUrl

SUPPORTED_SCHEMES = ("http", "https")


def validate_url(url: str) -> str:
    """Check that url is an absolute http(s) URL with a host

    Returns:
        The URL, normalized by urlsplit

    Raises:
        InvalidUrl: If the URL is relative, has another scheme, no host,
            or a malformed port or address
    """
    try:
        parts = urlsplit(url.strip())
        # Accessing port validates it
        parts.port
    except ValueError as e:
        raise InvalidUrl(url, str(e)) from e

    if not parts.scheme:
        raise InvalidUrl(url, "relative URL without a base")
    if parts.scheme.lower() not in SUPPORTED_SCHEMES:
        raise InvalidUrl(url, f"unsupported scheme '{parts.scheme}'")
    if not parts.hostname:
        raise InvalidUrl(url, "missing host")
    if any(char.isspace() for char in parts.netloc):
        raise InvalidUrl(url, "whitespace in host")

    return parts.geturl()
