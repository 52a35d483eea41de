# swiftline/infrastructure/http/__init__.py

"""HTTP transport helpers: request validation and the requests session"""

# Local imports
from swiftline.infrastructure.http._headers import flatten_headers
from swiftline.infrastructure.http._headers import parse_headers
from swiftline.infrastructure.http._session import build_session
from swiftline.infrastructure.http._url import validate_url

__all__ = ["build_session", "flatten_headers", "parse_headers", "validate_url"]
