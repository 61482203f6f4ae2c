"""Builder for the collapse clause of a search request."""

from __future__ import annotations

from search_dsl.core.constants import (
    K_FIELD,
    K_INNER_HITS,
    K_MAX_CONCURRENT_GROUP_SEARCHES,
)
from search_dsl.core.logging import get_logger
from search_dsl.core.source import Sourceable, SourceValue

logger = get_logger(__name__)


class CollapseBuilder(Sourceable):
    """Enables field collapsing on a search request.

    Results are reduced to one top document per distinct value of ``field``.
    Inner hits optionally expand each collapsed group.

    Example:
        >>> CollapseBuilder("user").max_concurrent_group_requests(4).source()
        {'field': 'user', 'max_concurrent_group_searches': 4}
    """

    def __init__(self, field: str = ""):
        self._field = field
        self._inner_hits: list[Sourceable] = []
        self._max_concurrent_group_requests: int | None = None

    def field(self, field: str) -> CollapseBuilder:
        """Set the field to collapse on."""
        self._field = field
        return self

    def inner_hit(self, *inner_hits: Sourceable) -> CollapseBuilder:
        """Replace the inner hits used to expand the collapsed results.

        Calling with no arguments clears any inner hits set before.
        """
        self._inner_hits = list(inner_hits)
        return self

    def max_concurrent_group_requests(self, max_requests: int) -> CollapseBuilder:
        """Set the number of group requests allowed to run concurrently in the inner_hits phase."""
        self._max_concurrent_group_requests = max_requests
        return self

    @property
    def field_name(self) -> str:
        return self._field

    @property
    def inner_hits(self) -> tuple[Sourceable, ...]:
        return tuple(self._inner_hits)

    @property
    def max_concurrent_group_searches(self) -> int | None:
        return self._max_concurrent_group_requests

    def source(self) -> dict[str, SourceValue]:
        """Generate the serializable collapse fragment.

        A single inner hit is emitted as an object, several as a list in
        insertion order.

        Returns:
            dict[str, SourceValue]: The collapse clause body.

        Raises:
            Exception: Whatever the first failing inner hit raised, unchanged.
        """
        src: dict[str, SourceValue] = {K_FIELD: self._field}

        if len(self._inner_hits) == 1:
            src[K_INNER_HITS] = self._inner_hit_source(0, self._inner_hits[0])
        elif len(self._inner_hits) > 1:
            src[K_INNER_HITS] = [
                self._inner_hit_source(idx, inner_hit)
                for idx, inner_hit in enumerate(self._inner_hits)
            ]

        if self._max_concurrent_group_requests is not None:
            src[K_MAX_CONCURRENT_GROUP_SEARCHES] = self._max_concurrent_group_requests

        logger.debug(
            "Built collapse fragment on field %r with %d inner hit(s)",
            self._field,
            len(self._inner_hits),
        )
        return src

    def _inner_hit_source(self, idx: int, inner_hit: Sourceable) -> SourceValue:
        try:
            return inner_hit.source()
        except Exception:
            logger.debug("Inner hit %d of collapse on %r failed to serialize", idx, self._field)
            raise
