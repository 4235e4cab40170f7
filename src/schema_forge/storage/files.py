# src/schema_forge/storage/files.py

import asyncio
import logging
import shutil
import uuid
from pathlib import Path

from schema_forge.codegen import CodeArtifact

logger = logging.getLogger(__name__)


class FileStorage:
    """
    File-system persistence for one pipeline.

    Every operation runs in a worker thread so the event loop keeps
    serving in-flight model calls.
    """

    def __init__(self, schema_dir: str | Path, projects_dir: str | Path) -> None:
        self._schema_dir = Path(schema_dir)
        self._projects_dir = Path(projects_dir)

    async def write_schema(self, schema_text: str) -> Path:
        """Persist schema text as `<schema_dir>/<uuid4>.sql`."""
        path = self._schema_dir / f"{uuid.uuid4()}.sql"
        await asyncio.to_thread(self._write, path, schema_text)
        logger.info("Saved database schema to %s", path)
        return path

    async def read_text(self, path: str | Path) -> str:
        return await asyncio.to_thread(Path(path).read_text, encoding="utf-8")

    def run_dir(self, run_id: str) -> Path:
        return self._projects_dir / run_id

    async def stage_template(self, template_dir: str | Path, run_dir: Path) -> Path:
        """Copy the template tree recursively into `run_dir`."""
        await asyncio.to_thread(
            shutil.copytree, Path(template_dir), run_dir, dirs_exist_ok=True
        )
        logger.info("Copied template %s to %s", template_dir, run_dir)
        return run_dir

    async def write_artifact(
        self, models_dir: Path, artifact: CodeArtifact
    ) -> Path:
        path = models_dir / artifact.filename
        await asyncio.to_thread(self._write, path, artifact.code)
        logger.debug("Wrote %s", path)
        return path

    @staticmethod
    def _write(path: Path, text: str) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
