from datetime import datetime, timezone
from pydantic import AwareDatetime, BaseModel, ConfigDict, Field, TypeAdapter, field_validator
from typing import List, Optional

# absent timestamps, rendered as 0001-01-01T00:00:00Z
ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)

def _stamp(alias: str):
    # strict: RFC 3339 strings only, unix numbers are rejected
    return Field(default=ZERO_TIME, alias=alias, strict=True)

def _null_as_empty(v):
    return "" if v is None else v

class Content(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: str = ""
    title: str = ""
    text: str = ""
    created_at: AwareDatetime = _stamp("createdAt")
    updated_at: AwareDatetime = _stamp("updatedAt")

    @field_validator("id", "title", "text", mode="before")
    @classmethod
    def null_strings(cls, v):
        return _null_as_empty(v)

class Note(BaseModel):
    model_config = ConfigDict(populate_by_name=True)
    id: str = ""
    title: str = ""
    content: Optional[List[Content]] = Field(default_factory=list)
    created_at: AwareDatetime = _stamp("createdAt")
    updated_at: AwareDatetime = _stamp("updatedAt")

    @field_validator("id", "title", mode="before")
    @classmethod
    def null_strings(cls, v):
        return _null_as_empty(v)

    @field_validator("content", mode="after")
    @classmethod
    def null_content(cls, v):
        return [] if v is None else v

# the whole persisted state: an ordered list of notes
Snapshot = TypeAdapter(List[Note])

def parse_snapshot(payload: bytes) -> List[Note]:
    """Raises pydantic.ValidationError when payload is not a notes collection."""
    return Snapshot.validate_json(payload)

def render_readable(notes: List[Note]) -> bytes:
    return Snapshot.dump_json(notes, indent=2, by_alias=True)

class StatusOut(BaseModel):
    status: str
    message: str
