# src/schema_forge/prompts/prompts_library.py

import logging
from pathlib import Path

import yaml

from .prompt import Prompt

logger = logging.getLogger(__name__)

BUNDLED_PROMPTS_DIR = Path(__file__).parent / "library"

PromptKey = tuple[str, str]


class PromptsLibrary:
    """
    Versioned prompts loaded from YAML files, keyed by (name, version).

    Directories are layered in the order given: a prompt in a later
    directory replaces the same (name, version) from an earlier one. Within
    a single directory a repeated key is an error.
    """

    def __init__(self, *directories: str | Path) -> None:
        self._prompts: dict[PromptKey, Prompt] = {}
        for directory in directories or (BUNDLED_PROMPTS_DIR,):
            layer = self._read_directory(Path(directory))
            overridden = sorted(self._prompts.keys() & layer.keys())
            if overridden:
                logger.info("Prompts overridden by %s: %s", directory, overridden)
            self._prompts.update(layer)
        logger.info("Loaded %d prompts", len(self._prompts))

    def get(self, name: str, version: str = "1") -> Prompt:
        prompt = self._prompts.get((name, version))
        if prompt is None:
            raise KeyError(f"Prompt '{name}' version '{version}' not found")
        return prompt

    def list(self) -> list[PromptKey]:
        return sorted(self._prompts)

    @staticmethod
    def _read_directory(directory: Path) -> dict[PromptKey, Prompt]:
        if not directory.is_dir():
            raise FileNotFoundError(f"Prompts directory not found: {directory}")

        layer: dict[PromptKey, Prompt] = {}
        for path in sorted(directory.glob("*.yaml")):
            prompt = Prompt.model_validate(yaml.safe_load(path.read_text(encoding="utf-8")))
            key = (prompt.name, prompt.version)
            if key in layer:
                raise ValueError(
                    f"Duplicate prompt '{prompt.name}' version '{prompt.version}' in {path}"
                )
            layer[key] = prompt
            logger.debug("Loaded prompt %s v%s from %s", *key, path)
        return layer
