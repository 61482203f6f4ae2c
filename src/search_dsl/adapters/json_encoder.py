"""Render search fragments as JSON text."""

from __future__ import annotations

import json

from search_dsl.core.exceptions import FragmentEncodingError
from search_dsl.core.logging import get_logger
from search_dsl.core.source import Sourceable

logger = get_logger(__name__)


def source_to_json(
    sourceable: Sourceable,
    *,
    indent: int | None = None,
    sort_keys: bool = False,
) -> str:
    """Serialize a fragment and dump it to JSON.

    Errors raised by ``sourceable.source()`` propagate unchanged.

    Args:
        sourceable: Fragment to render.
        indent: Optional indentation passed to ``json.dumps``.
        sort_keys: Whether to sort mapping keys.

    Returns:
        JSON document text.

    Raises:
        FragmentEncodingError: If the serialized value is not JSON compatible.
    """
    value = sourceable.source()
    try:
        return json.dumps(value, indent=indent, sort_keys=sort_keys)
    except (TypeError, ValueError) as exc:
        logger.warning("Failed to encode %s as JSON: %s", type(sourceable).__name__, exc)
        raise FragmentEncodingError(
            f"{type(sourceable).__name__} produced a value that is not JSON serializable: {exc}"
        ) from exc
