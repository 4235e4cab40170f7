from dataclasses import dataclass, field
from time import monotonic

from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook


@dataclass(frozen=True)
class Chunk:
    chunk_id: str
    text: str
    offset_start: int
    offset_end: int
    metadata: dict = field(default_factory=dict)


def split_text(
    text: str,
    *,
    chunk_size: int,
    metadata: dict | None = None,
    metrics_hook: MetricsHook = NoOpMetricsHook(),
) -> list[Chunk]:
    """Split `text` into contiguous, non-overlapping chunks of `chunk_size`.

    Yields ceil(len(text) / chunk_size) chunks; only the last one may be
    shorter. Empty text yields no chunks.
    """
    started = monotonic()
    if chunk_size <= 0:
        raise ValueError("chunk_size must be > 0")

    metadata = metadata or {}
    source_id = metadata.get("source_id", "unknown")
    chunks = []

    for offset in range(0, len(text), chunk_size):
        piece = text[offset : offset + chunk_size]
        end = offset + len(piece)
        chunks.append(
            Chunk(
                chunk_id=f"{source_id}:{offset}:{end}",
                text=piece,
                offset_start=offset,
                offset_end=end,
                metadata=dict(metadata),
            )
        )

    elapsed_ms = 1000 * (monotonic() - started)
    metrics_hook.record_latency(names.CHUNKING_DURATION, elapsed_ms)
    metrics_hook.increment(names.CHUNKING_CHUNKS_CREATED, len(chunks))
    return chunks
