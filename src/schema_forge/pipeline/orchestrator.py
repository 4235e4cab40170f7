# src/schema_forge/pipeline/orchestrator.py

"""End-to-end pipeline: document -> schema file -> per-table model code.

Stages run strictly in order. Any unrecovered exception aborts the rest of
the run; files written before the failure stay on disk.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from pathlib import Path
from time import monotonic

from schema_forge.codegen import EntityCodeGenerator
from schema_forge.config import PipelineConfig
from schema_forge.errors import ModelError
from schema_forge.extraction import StatementExtractor
from schema_forge.llms.factory import create_model_client
from schema_forge.observability import names
from schema_forge.observability.base import MetricsHook, NoOpMetricsHook
from schema_forge.parsers import PdfTextExtractor, TextExtractor
from schema_forge.prompts import BUNDLED_PROMPTS_DIR, PromptsLibrary
from schema_forge.storage import FileStorage
from schema_forge.summarization import MapReduceSummarizer

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    schema_path: Path
    output_dir: Path
    artifact_paths: list[Path] = field(default_factory=list)


class PipelineOrchestrator:
    def __init__(
        self,
        *,
        text_extractor: TextExtractor,
        summarizer: MapReduceSummarizer,
        extractor: StatementExtractor,
        generator: EntityCodeGenerator,
        storage: FileStorage,
        config: PipelineConfig,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> None:
        self._text_extractor = text_extractor
        self._summarizer = summarizer
        self._extractor = extractor
        self._generator = generator
        self._storage = storage
        self._config = config
        self.metrics_hook = metrics_hook

    @classmethod
    def from_config(
        cls,
        config: PipelineConfig,
        metrics_hook: MetricsHook = NoOpMetricsHook(),
    ) -> "PipelineOrchestrator":
        client = create_model_client(config.llm, metrics_hook)
        prompt_dirs = [BUNDLED_PROMPTS_DIR]
        if config.prompts_dir is not None:
            prompt_dirs.append(config.prompts_dir)
        prompts = PromptsLibrary(*prompt_dirs)
        return cls(
            text_extractor=PdfTextExtractor(),
            summarizer=MapReduceSummarizer(
                client,
                prompts,
                chunk_size=config.chunk_size,
                temperature=config.temperature,
                domain_description=config.domain_description,
                language=config.summary_language,
                metrics_hook=metrics_hook,
            ),
            extractor=StatementExtractor(),
            generator=EntityCodeGenerator(
                client,
                prompts,
                temperature=config.temperature,
                extension=config.artifact_extension,
                metrics_hook=metrics_hook,
            ),
            storage=FileStorage(config.schema_dir, config.projects_dir),
            config=config,
            metrics_hook=metrics_hook,
        )

    async def run(self, document_path: str | Path) -> PipelineResult:
        started = monotonic()
        try:
            result = await self._run(Path(document_path))
        except ModelError as exc:
            logger.exception("Pipeline run failed for %s", document_path)
            if exc.payload is not None:
                logger.error("Model error payload: %s", exc.payload)
            raise
        except Exception:
            logger.exception("Pipeline run failed for %s", document_path)
            raise
        finally:
            self.metrics_hook.record_latency(
                names.PIPELINE_RUN_DURATION, 1000 * (monotonic() - started)
            )
        return result

    async def _run(self, document_path: Path) -> PipelineResult:
        logger.info("Extracting text from %s", document_path)
        text = await asyncio.to_thread(self._text_extractor.extract_text, document_path)

        schema_text = await self._summarizer.summarize(text)
        schema_path = await self._storage.write_schema(schema_text)

        run_dir = await self._storage.stage_template(
            self._config.template_dir, self._storage.run_dir(schema_path.stem)
        )

        # Stage two works from the persisted file, not the in-memory text
        schema_text = await self._storage.read_text(schema_path)
        statements = self._extractor.extract(schema_text)
        self.metrics_hook.increment(names.PIPELINE_STATEMENTS_FOUND, len(statements))
        if not statements:
            logger.warning(
                "No CREATE TABLE statements in %s, skipping code generation", schema_path
            )
            return PipelineResult(schema_path=schema_path, output_dir=run_dir)

        template_reference = await self._storage.read_text(
            run_dir / self._config.template_reference
        )

        artifacts = await self._generator.generate_all(statements, template_reference)

        models_dir = run_dir / self._config.models_dir
        artifact_paths = await asyncio.gather(
            *[self._storage.write_artifact(models_dir, a) for a in artifacts]
        )

        logger.info(
            "CRUD files generated in %s (%d of %d tables)",
            run_dir,
            len(artifact_paths),
            len(statements),
        )
        return PipelineResult(
            schema_path=schema_path,
            output_dir=run_dir,
            artifact_paths=list(artifact_paths),
        )
