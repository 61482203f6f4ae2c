"""Wire keys of the collapse clause in a search request body."""

from typing import Final

K_FIELD: Final[str] = "field"
K_INNER_HITS: Final[str] = "inner_hits"
# The setter is named after group "requests"; the wire key says "searches".
K_MAX_CONCURRENT_GROUP_SEARCHES: Final[str] = "max_concurrent_group_searches"
