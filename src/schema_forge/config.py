# src/schema_forge/config.py

from dataclasses import dataclass, field
from pathlib import Path

from schema_forge.llms.config import LLMConfig
from schema_forge.summarization import DEFAULT_CHUNK_SIZE, DEFAULT_DOMAIN_DESCRIPTION

BUNDLED_TEMPLATE_DIR = Path(__file__).parent / "templates" / "api_src"


@dataclass(frozen=True)
class PipelineConfig:
    """Configuration for one pipeline run.

    Immutable. Explicit. Paths are relative to the working directory unless
    given absolute.
    """

    llm: LLMConfig = field(default_factory=LLMConfig)
    schema_dir: Path = Path("db_schema")
    projects_dir: Path = Path("projects")
    template_dir: Path = BUNDLED_TEMPLATE_DIR
    # Relative to the staged output directory
    template_reference: Path = Path("server/models/index.js")
    models_dir: Path = Path("server/models")
    artifact_extension: str = "js"
    chunk_size: int = DEFAULT_CHUNK_SIZE
    temperature: float = 0.7
    domain_description: str = DEFAULT_DOMAIN_DESCRIPTION
    summary_language: str = "Korean"
    # Layered over the bundled prompts; same name and version replaces them
    prompts_dir: Path | None = None
