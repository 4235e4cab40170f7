"""
cli.py - command line entry point

Usage:
    schema-forge requirements.pdf --domain "a veterinary clinic booking system"
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from schema_forge.config import BUNDLED_TEMPLATE_DIR, PipelineConfig
from schema_forge.llms.config import LLMConfig
from schema_forge.observability import LoggingMetricsHook, NoOpMetricsHook
from schema_forge.pipeline import PipelineOrchestrator
from schema_forge.summarization import DEFAULT_DOMAIN_DESCRIPTION

_LOG = logging.getLogger("schema_forge")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="schema-forge",
        description="Generate a SQL schema and per-table CRUD models from a document",
    )
    parser.add_argument("document", type=Path, help="Path to the input PDF")
    parser.add_argument("--schema-dir", type=Path, default=Path("db_schema"))
    parser.add_argument("--projects-dir", type=Path, default=Path("projects"))
    parser.add_argument("--template-dir", type=Path, default=BUNDLED_TEMPLATE_DIR)
    parser.add_argument("--prompts-dir", type=Path, default=None)
    parser.add_argument(
        "--provider", choices=("openai", "anthropic"), default="openai"
    )
    parser.add_argument("--model", default="gpt-3.5-turbo")
    parser.add_argument(
        "--domain",
        default=DEFAULT_DOMAIN_DESCRIPTION,
        help="Description of the system the document specifies",
    )
    parser.add_argument("--language", default="Korean", help="Summary language")
    parser.add_argument("--chunk-size", type=int, default=4000)
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    return parser


def config_from_args(args: argparse.Namespace) -> PipelineConfig:
    return PipelineConfig(
        llm=LLMConfig(provider=args.provider, model=args.model),
        schema_dir=args.schema_dir,
        projects_dir=args.projects_dir,
        template_dir=args.template_dir,
        prompts_dir=args.prompts_dir,
        domain_description=args.domain,
        summary_language=args.language,
        chunk_size=args.chunk_size,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    load_dotenv()
    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    if not args.debug:
        logging.getLogger("httpx").setLevel(logging.WARNING)

    metrics_hook = LoggingMetricsHook() if args.debug else NoOpMetricsHook()
    orchestrator = PipelineOrchestrator.from_config(config_from_args(args), metrics_hook)

    try:
        result = asyncio.run(orchestrator.run(args.document))
    except Exception as exc:
        # Already logged with traceback by the orchestrator
        _LOG.error("Run aborted: %s", exc)
        return 1

    if not result.artifact_paths:
        print(
            f"Schema saved to {result.schema_path}; no tables found, "
            f"template staged in {result.output_dir}"
        )
    else:
        print(f"CRUD files generated in {result.output_dir}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
