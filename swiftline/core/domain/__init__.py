# swiftline/core/domain/__init__.py

"""Domain models and error kinds"""

# Local imports
from swiftline.core.domain.errors import InvalidHeader
from swiftline.core.domain.errors import InvalidUrl
from swiftline.core.domain.errors import IoError
from swiftline.core.domain.errors import NetworkError
from swiftline.core.domain.errors import ParseError
from swiftline.core.domain.errors import ResponseParseError
from swiftline.core.domain.errors import SwiftlineError
from swiftline.core.domain.fetch_outcome import DisplayedResponse
from swiftline.core.domain.fetch_outcome import FetchOutcome
from swiftline.core.domain.fetch_outcome import SavedDownload

__all__ = [
    "SwiftlineError",
    "IoError",
    "ParseError",
    "InvalidUrl",
    "InvalidHeader",
    "NetworkError",
    "ResponseParseError",
    "DisplayedResponse",
    "SavedDownload",
    "FetchOutcome",
]
