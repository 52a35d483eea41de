# swiftline/core/domain/fetch_outcome.py

"""Fetch outcome domain models"""

# Third party imports
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import JsonValue


class DisplayedResponse(BaseModel):
    """Response that was buffered and rendered inline"""

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason: str = Field(default="", description="HTTP reason phrase")
    content_type: str = Field(default="", description="Raw Content-Type header value")
    text: str | None = Field(default=None, description="Body as text when not pretty JSON")
    json_body: JsonValue = Field(default=None, description="Parsed body when pretty JSON")
    is_json: bool = Field(default=False, description="True when json_body holds the body")


class SavedDownload(BaseModel):
    """Response whose body was streamed to a file"""

    model_config = ConfigDict(frozen=True)

    status_code: int
    reason: str = Field(default="", description="HTTP reason phrase")
    path: str
    bytes_written: int = Field(ge=0)
    content_length: int | None = Field(default=None, description="Declared Content-Length")


type FetchOutcome = DisplayedResponse | SavedDownload
