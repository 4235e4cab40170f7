# src/schema_forge/summarization/map_reduce.py

"""Map-reduce summarization of a document into SQL schema text.

Map: every chunk is condensed by its own model call, all calls in flight at
once. Reduce: the partial summaries are space-joined in chunk order and a
single final call turns them into CREATE TABLE statements.

The map join is fail-fast: the first chunk that fails rejects the whole
summarize call. Sibling calls are not cancelled; their results are dropped.
"""

import asyncio
import logging
import math
from time import monotonic

from schema_forge.chunking import Chunk, split_text
from schema_forge.errors import EmptyDocumentError
from schema_forge.llms.base import ModelRequest
from schema_forge.llms.retrying import RetryingModelClient
from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook
from schema_forge.prompts import CHUNK_REFINE, SCHEMA_GENERATION, PromptsLibrary

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 4000
DEFAULT_DOMAIN_DESCRIPTION = (
    "an online camping reservation platform which allows users to search and "
    "reserve camping spots based on various criteria"
)


class MapReduceSummarizer:
    def __init__(
        self,
        client: RetryingModelClient,
        prompts: PromptsLibrary,
        *,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        temperature: float = 0.7,
        domain_description: str = DEFAULT_DOMAIN_DESCRIPTION,
        language: str = "Korean",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        if chunk_size <= 0:
            raise ValueError("chunk_size must be > 0")
        self._client = client
        self._refine_prompt = prompts.get(CHUNK_REFINE)
        self._schema_prompt = prompts.get(SCHEMA_GENERATION)
        self._chunk_size = chunk_size
        self._temperature = temperature
        self._domain_description = domain_description
        self._language = language
        self.metrics_hook = metrics_hook

    async def summarize(self, text: str) -> str:
        """Return SQL schema text for the document `text`.

        Raises:
            EmptyDocumentError: `text` is empty.
            ModelError: A chunk call or the final call failed.
        """
        if not text:
            raise EmptyDocumentError("Document has no text to summarize")

        started = monotonic()
        chunks = split_text(
            text, chunk_size=self._chunk_size, metrics_hook=self.metrics_hook
        )
        target_length = self.target_length(len(chunks))
        logger.info(
            "Summarizing %d chars in %d chunks, target length %d",
            len(text),
            len(chunks),
            target_length,
        )

        partials = await asyncio.gather(
            *[self._summarize_chunk(chunk, target_length) for chunk in chunks]
        )
        excerpt = " ".join(partials)
        logger.debug("Combined excerpt: %d chars", len(excerpt))

        schema_text = await self._generate_schema(excerpt)

        self.metrics_hook.record_latency(
            names.SUMMARIZE_DURATION, 1000 * (monotonic() - started)
        )
        self.metrics_hook.increment(names.SUMMARIZE_CHUNKS_TOTAL, len(chunks))
        return schema_text

    def target_length(self, chunk_count: int) -> int:
        """Length hint handed to each chunk call: ceil(chunk_size / N)."""
        return math.ceil(self._chunk_size / chunk_count)

    async def _summarize_chunk(self, chunk: Chunk, target_length: int) -> str:
        system = self._refine_prompt.render(
            target_length=target_length, language=self._language
        )
        response = await self._client.invoke(
            ModelRequest.from_prompts(system, chunk.text, temperature=self._temperature)
        )
        if response.content is None:
            logger.warning("Chunk %s produced no content", chunk.chunk_id)
            return ""
        logger.debug(
            "Chunk %s summarized to %d chars", chunk.chunk_id, len(response.content)
        )
        return response.content

    async def _generate_schema(self, excerpt: str) -> str:
        system = self._schema_prompt.render(domain_description=self._domain_description)
        response = await self._client.invoke(
            ModelRequest.from_prompts(system, excerpt, temperature=self._temperature)
        )
        if response.content is None:
            logger.warning("Schema generation produced no content")
            return ""
        logger.info("Generated schema text: %d chars", len(response.content))
        return response.content
