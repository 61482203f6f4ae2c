"""Collapse clause schema."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from search_dsl.builders.collapse import CollapseBuilder
from search_dsl.core.source import RawSource


class CollapseRequest(BaseModel):
    """Collapse clause described as data (request bodies, config files)."""

    # Unknown keys are errors so misspelled options are not dropped.
    model_config = ConfigDict(extra="forbid")

    field: str = Field("", description="Field to collapse results on")
    inner_hits: list[dict[str, Any]] = Field(
        default_factory=list, description="Inner hit definitions, in order"
    )
    max_concurrent_group_searches: int | None = Field(
        None, description="Concurrent group requests allowed in the inner_hits phase"
    )

    @field_validator("inner_hits", mode="before")
    @classmethod
    def _wrap_single_inner_hit(cls, value: Any) -> Any:
        # The wire format sends a lone inner hit as an object instead of a list.
        if isinstance(value, Mapping):
            return [dict(value)]
        return value

    @classmethod
    def from_source(cls, source: Mapping[str, Any]) -> "CollapseRequest":
        """Parse a serialized collapse clause.

        Args:
            source: Mapping shaped like ``CollapseBuilder.source()`` output.

        Returns:
            CollapseRequest: Validated collapse clause.
        """
        return cls.model_validate(source)

    def to_builder(self) -> CollapseBuilder:
        """Create a builder equivalent to this clause."""
        builder = CollapseBuilder(self.field).inner_hit(
            *(RawSource(body=hit) for hit in self.inner_hits)
        )
        if self.max_concurrent_group_searches is not None:
            builder.max_concurrent_group_requests(self.max_concurrent_group_searches)
        return builder
