from pathlib import Path
from unittest.mock import AsyncMock, MagicMock, patch

from schema_forge.cli import build_parser, config_from_args, main
from schema_forge.errors import PermanentModelError
from schema_forge.pipeline import PipelineResult


def test_config_from_args() -> None:
    args = build_parser().parse_args(
        [
            "requirements.pdf",
            "--provider",
            "anthropic",
            "--model",
            "claude-sonnet-4-20250514",
            "--domain",
            "a library lending system",
            "--chunk-size",
            "2000",
        ]
    )

    config = config_from_args(args)

    assert args.document == Path("requirements.pdf")
    assert config.llm.provider == "anthropic"
    assert config.llm.model == "claude-sonnet-4-20250514"
    assert config.domain_description == "a library lending system"
    assert config.chunk_size == 2000


def test_main_success(tmp_path: Path, capsys) -> None:
    orchestrator = MagicMock()
    orchestrator.run = AsyncMock(
        return_value=PipelineResult(
            schema_path=tmp_path / "a.sql",
            output_dir=tmp_path / "projects" / "a",
            artifact_paths=[tmp_path / "projects" / "a" / "server" / "models" / "users.js"],
        )
    )

    with patch(
        "schema_forge.cli.PipelineOrchestrator.from_config", return_value=orchestrator
    ), patch("schema_forge.cli.load_dotenv"):
        assert main(["requirements.pdf"]) == 0

    orchestrator.run.assert_awaited_once_with(Path("requirements.pdf"))
    assert "CRUD files generated in" in capsys.readouterr().out


def test_main_failure_returns_non_zero() -> None:
    orchestrator = MagicMock()
    orchestrator.run = AsyncMock(side_effect=PermanentModelError("bad key"))

    with patch(
        "schema_forge.cli.PipelineOrchestrator.from_config", return_value=orchestrator
    ), patch("schema_forge.cli.load_dotenv"):
        assert main(["requirements.pdf"]) == 1


def test_main_without_tables_still_succeeds(tmp_path: Path, capsys) -> None:
    orchestrator = MagicMock()
    orchestrator.run = AsyncMock(
        return_value=PipelineResult(
            schema_path=tmp_path / "a.sql", output_dir=tmp_path / "projects" / "a"
        )
    )

    with patch(
        "schema_forge.cli.PipelineOrchestrator.from_config", return_value=orchestrator
    ), patch("schema_forge.cli.load_dotenv"):
        assert main(["requirements.pdf"]) == 0

    assert "no tables found" in capsys.readouterr().out
