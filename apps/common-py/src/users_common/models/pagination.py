"""Pagination models."""

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class PageDescriptor(BaseModel):
    """Metadata describing one page of the user collection.

    Derived per list request and never stored.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    current_page: int = Field(..., ge=1)
    page_size: int = Field(..., ge=1)
    total_count: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)
    previous_page_link: str | None = None
    next_page_link: str | None = None

    @computed_field(alias="hasPrevious")  # type: ignore[prop-decorator]
    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @computed_field(alias="hasNext")  # type: ignore[prop-decorator]
    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    def to_header(self) -> str:
        """Serialize for the X-Pagination response header."""
        return self.model_dump_json(by_alias=True)
