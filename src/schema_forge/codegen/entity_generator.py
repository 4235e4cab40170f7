# src/schema_forge/codegen/entity_generator.py

import asyncio
import logging
from dataclasses import dataclass
from time import monotonic

from pydantic import BaseModel, ConfigDict, Field

from schema_forge.extraction import TableStatement, first_code_block
from schema_forge.llms.base import ModelRequest
from schema_forge.llms.retrying import RetryingModelClient
from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook
from schema_forge.prompts import CRUD_GENERATION, PromptsLibrary

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CodeArtifact:
    table_name: str
    code: str
    extension: str = "js"

    @property
    def filename(self) -> str:
        return f"{self.table_name}.{self.extension}"


class GenerationContext(BaseModel):
    """User message of a CRUD generation request, sent as JSON."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    table_name: str = Field(alias="tableName")
    table_schema: str = Field(alias="tableSchema")
    index_template: str = Field(alias="indexTemplate")


class EntityCodeGenerator:
    def __init__(
        self,
        client: RetryingModelClient,
        prompts: PromptsLibrary,
        *,
        temperature: float = 0.7,
        extension: str = "js",
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._client = client
        self._system_prompt = prompts.get(CRUD_GENERATION).render()
        self._temperature = temperature
        self._extension = extension
        self.metrics_hook = metrics_hook

    async def generate(
        self, statement: TableStatement, template_reference: str
    ) -> CodeArtifact | None:
        """Generate model code for one table.

        Returns None when the statement has no name or the response holds no
        fenced code block. Model failures propagate.
        """
        if statement.name is None:
            logger.warning(
                "Skipping statement at offset %d: no table name", statement.offset
            )
            self.metrics_hook.increment(
                names.CODEGEN_SKIPPED_TOTAL, labels={"reason": "no_name"}
            )
            return None

        context = GenerationContext(
            table_name=statement.name,
            table_schema=statement.text,
            index_template=template_reference,
        )
        response = await self._client.invoke(
            ModelRequest.from_prompts(
                self._system_prompt,
                context.model_dump_json(by_alias=True),
                temperature=self._temperature,
            )
        )

        code = first_code_block(response.content or "")
        if code is None:
            logger.error(
                "Could not extract a code block from model output for table %s",
                statement.name,
            )
            self.metrics_hook.increment(
                names.CODEGEN_SKIPPED_TOTAL, labels={"reason": "no_code_block"}
            )
            return None

        logger.info("Generated %d chars of code for table %s", len(code), statement.name)
        return CodeArtifact(
            table_name=statement.name, code=code, extension=self._extension
        )

    async def generate_all(
        self, statements: list[TableStatement], template_reference: str
    ) -> list[CodeArtifact]:
        """Generate code for every named statement concurrently.

        The first model failure rejects the batch; siblings keep running and
        their outcomes are discarded. Artifacts keep statement order.
        """
        started = monotonic()
        unique = self._last_by_name(statements)
        logger.info("Generating code for %d tables", len(unique))

        results = await asyncio.gather(
            *[self.generate(statement, template_reference) for statement in unique]
        )
        artifacts = [artifact for artifact in results if artifact is not None]

        self.metrics_hook.record_latency(
            names.CODEGEN_DURATION, 1000 * (monotonic() - started)
        )
        self.metrics_hook.increment(names.CODEGEN_ARTIFACTS_TOTAL, len(artifacts))
        return artifacts

    def _last_by_name(self, statements: list[TableStatement]) -> list[TableStatement]:
        """Drop earlier statements whose table name repeats later on."""
        last_index = {s.name: i for i, s in enumerate(statements) if s.name is not None}
        unique = []
        for i, statement in enumerate(statements):
            if statement.name is not None and last_index[statement.name] != i:
                logger.warning(
                    "Duplicate table name %s at offset %d, a later statement wins",
                    statement.name,
                    statement.offset,
                )
                continue
            unique.append(statement)
        return unique
