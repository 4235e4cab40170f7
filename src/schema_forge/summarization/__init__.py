from .map_reduce import (
    DEFAULT_CHUNK_SIZE,
    DEFAULT_DOMAIN_DESCRIPTION,
    MapReduceSummarizer,
)

__all__ = [
    "DEFAULT_CHUNK_SIZE",
    "DEFAULT_DOMAIN_DESCRIPTION",
    "MapReduceSummarizer",
]
