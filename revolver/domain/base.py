"""Shared base for domain models stored and served as camelCase JSON."""

from datetime import datetime, timezone
from uuid import uuid4

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_timestamp(value: datetime) -> str:
    """ISO 8601 in UTC with a trailing Z, the way pydantic serializes datetimes."""
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def new_id() -> str:
    return str(uuid4())


class CamelModel(BaseModel):
    """Model whose JSON keys are camelCase while attributes stay snake_case."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_json_dict(self, **kwargs) -> dict:
        """Dump to a JSON-ready dict using the camelCase aliases."""
        return self.model_dump(mode="json", by_alias=True, **kwargs)
