from .prompt import Prompt
from .prompts_library import BUNDLED_PROMPTS_DIR, PromptsLibrary

CHUNK_REFINE = "chunk_refine"
SCHEMA_GENERATION = "schema_generation"
CRUD_GENERATION = "crud_generation"

__all__ = [
    "BUNDLED_PROMPTS_DIR",
    "CHUNK_REFINE",
    "CRUD_GENERATION",
    "SCHEMA_GENERATION",
    "Prompt",
    "PromptsLibrary",
]
