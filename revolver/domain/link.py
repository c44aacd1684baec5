"""Link domain models."""

from datetime import datetime

from pydantic import Field

from revolver.domain.base import CamelModel, new_id, utc_now


class Link(CamelModel):
    """A directed, manually created relation between two notes."""

    id: str = Field(default_factory=new_id)
    source_id: str
    target_id: str
    type: str = "manual"
    created_at: datetime = Field(default_factory=utc_now)


class LinkInput(CamelModel):
    source_id: str | None = None
    target_id: str | None = None
    type: str = "manual"
