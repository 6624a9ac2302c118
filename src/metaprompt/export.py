"""
Export record of a compiled prompt.

The export record is the only persisted representation: the schema metadata,
the collected form data, the compiled prompt and the moment of compilation.
It serializes to JSON with the keys `metadata`, `formData`,
`generatedPrompt` and `timestamp`.
"""

from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_serializer

from metaprompt.core.types import FormValue
from metaprompt.schema.models import Metadata

EXPORT_FILENAME_PREFIX = "metaprompt_"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and a `Z` suffix."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


class ExportRecord(BaseModel):
    """Structured record handed to the export/packaging layer."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    metadata: Metadata
    form_data: dict[str, FormValue] = Field(alias="formData")
    generated_prompt: str = Field(alias="generatedPrompt")
    timestamp: datetime = Field(default_factory=utc_now)

    @field_serializer("timestamp")
    def _serialize_timestamp(self, timestamp: datetime) -> str:
        return format_timestamp(timestamp)

    def to_json(self, indent: int | None = 2) -> str:
        """Serialize with the export key names."""
        return self.model_dump_json(by_alias=True, indent=indent)

    def filename(self) -> str:
        """Suggested download name, `metaprompt_<epoch milliseconds>.json`."""
        moment = self.timestamp
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        return f"{EXPORT_FILENAME_PREFIX}{int(moment.timestamp() * 1000)}.json"
