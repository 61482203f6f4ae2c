"""Capability contract shared by every serializable search fragment."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, TypeAlias

SourceValue: TypeAlias = dict[str, Any] | list[Any] | str | int | float | bool | None


class Sourceable(ABC):
    """Anything that can produce the JSON-compatible body of a fragment."""

    @abstractmethod
    def source(self) -> SourceValue:
        """Build the serializable representation.

        Returns:
            SourceValue: JSON-compatible value to embed in a request body.

        Raises:
            Exception: Implementations raise when they cannot serialize.
        """


@dataclass(frozen=True)
class RawSource(Sourceable):
    """Pre-built fragment body, e.g. an inner hit definition read from config.

    The body is copied on construction and exposed read-only. Instances
    compare by body and are unhashable.
    """

    body: Mapping[str, Any] = field(default_factory=dict)

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        object.__setattr__(self, "body", MappingProxyType(copy.deepcopy(dict(self.body))))

    def source(self) -> dict[str, Any]:
        return copy.deepcopy(dict(self.body))
