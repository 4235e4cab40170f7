# Chunking
from .chunking import Chunk, split_text

# Code generation
from .codegen import CodeArtifact, EntityCodeGenerator

# Config
from .config import PipelineConfig

# Errors
from .errors import (
    EmptyDocumentError,
    ModelError,
    ModelTimeoutError,
    PayloadTooLargeError,
    PermanentModelError,
)

# Extraction
from .extraction import StatementExtractor, TableStatement

# LLMs
from .llms import (
    LLMConfig,
    LLMResponse,
    Message,
    ModelRequest,
    RetryingModelClient,
    Role,
    create_model_client,
)

# Observability
from .observability import LoggingMetricsHook, MetricsHook, NoOpMetricsHook

# Pipeline
from .pipeline import PipelineOrchestrator, PipelineResult

# Prompts
from .prompts import Prompt, PromptsLibrary

# Summarization
from .summarization import MapReduceSummarizer

__all__ = [
    # Chunking
    "Chunk",
    "split_text",
    # Code generation
    "CodeArtifact",
    "EntityCodeGenerator",
    # Config
    "PipelineConfig",
    # Errors
    "EmptyDocumentError",
    "ModelError",
    "ModelTimeoutError",
    "PayloadTooLargeError",
    "PermanentModelError",
    # Extraction
    "StatementExtractor",
    "TableStatement",
    # LLMs
    "LLMConfig",
    "LLMResponse",
    "Message",
    "ModelRequest",
    "RetryingModelClient",
    "Role",
    "create_model_client",
    # Observability
    "LoggingMetricsHook",
    "MetricsHook",
    "NoOpMetricsHook",
    # Pipeline
    "PipelineOrchestrator",
    "PipelineResult",
    # Prompts
    "Prompt",
    "PromptsLibrary",
    # Summarization
    "MapReduceSummarizer",
]
