# swiftline/__init__.py

"""swiftline

A minimal command-line tool with two features: an HTTP GET client with
header injection, timeouts, streamed downloads and JSON pretty-printing, and
a JSON value selector driven by a dot/bracket path expression.
"""

# Version info, set before the imports below so submodules can read it
__version__ = "0.1.0"

# Local imports
# JSON selection
from swiftline.application.processing import NOT_FOUND  # noqa: E402
from swiftline.application.processing import parse_json  # noqa: E402
from swiftline.application.processing import resolve_input  # noqa: E402
from swiftline.application.processing import resolve_path  # noqa: E402

# Services
from swiftline.application.services import HttpFetchService  # noqa: E402
from swiftline.application.services import JsonSelectService  # noqa: E402

# Domain models and errors
from swiftline.core.domain import DisplayedResponse  # noqa: E402
from swiftline.core.domain import InvalidHeader  # noqa: E402
from swiftline.core.domain import InvalidUrl  # noqa: E402
from swiftline.core.domain import IoError  # noqa: E402
from swiftline.core.domain import NetworkError  # noqa: E402
from swiftline.core.domain import ParseError  # noqa: E402
from swiftline.core.domain import ResponseParseError  # noqa: E402
from swiftline.core.domain import SavedDownload  # noqa: E402
from swiftline.core.domain import SwiftlineError  # noqa: E402

# HTTP request helpers and configuration
from swiftline.infrastructure.config import get_config  # noqa: E402
from swiftline.infrastructure.http import parse_headers  # noqa: E402
from swiftline.infrastructure.http import validate_url  # noqa: E402

__all__: list[str] = [
    # JSON selection
    "resolve_input",
    "parse_json",
    "resolve_path",
    "NOT_FOUND",
    "JsonSelectService",
    # HTTP
    "parse_headers",
    "validate_url",
    "HttpFetchService",
    # Outcomes
    "DisplayedResponse",
    "SavedDownload",
    # Errors
    "SwiftlineError",
    "IoError",
    "ParseError",
    "InvalidUrl",
    "InvalidHeader",
    "NetworkError",
    "ResponseParseError",
    # Configuration
    "get_config",
    # Version
    "__version__",
]
