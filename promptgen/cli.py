"""CLI entrypoints for promptgen commands."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from .config import ConfigError, load_config
from .logging import configure_logging
from .orchestrator import Orchestrator, PromptWriteError
from .prompting.constants import TASK_TYPES
from .prompting.store import TemplateStore


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    kwargs: dict[str, object] = {
        "action": "store_true",
        "help": "Increase log verbosity for troubleshooting.",
    }
    if suppress_default:
        kwargs["default"] = argparse.SUPPRESS
    else:
        kwargs["default"] = False
    parser.add_argument(
        "-v",
        "--verbose",
        **kwargs,
    )


def _add_path_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Path to the project root (defaults to current directory).",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="promptgen",
        description="Analyze a web project and generate a structured AI assistant prompt.",
    )
    _add_verbose_option(parser)
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to a .promptgen.yml file or the directory containing it.",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Also write timestamped log records to this file.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    generate_parser = subparsers.add_parser(
        "generate",
        help="Analyze a project and write an AI prompt.",
    )
    _add_verbose_option(generate_parser, suppress_default=True)
    _add_path_argument(generate_parser)
    generate_parser.add_argument(
        "question",
        nargs="?",
        default="",
        help="What you need help with.",
    )
    generate_parser.add_argument(
        "--template",
        default=None,
        help="Template identifier to render (defaults to the configured template).",
    )
    generate_parser.add_argument(
        "--task",
        choices=TASK_TYPES,
        default=None,
        help="Append task-specific guidance to the prompt.",
    )
    generate_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Directory that receives the generated prompt file.",
    )
    generate_parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the prompt instead of writing it to a file.",
    )

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Run a quick analysis without generating a prompt.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    _add_path_argument(analyze_parser)
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the full analysis record as JSON.",
    )

    templates_parser = subparsers.add_parser(
        "templates",
        help="List available prompt templates.",
    )
    _add_verbose_option(templates_parser, suppress_default=True)
    templates_parser.add_argument(
        "--templates-dir",
        type=Path,
        default=None,
        help="Additional directory of user templates.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for promptgen commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=args.log_file)

    try:
        config = load_config(args.config or Path.cwd())
    except ConfigError as exc:
        parser.exit(1, f"{exc}\n")

    if args.command == "templates":
        templates_dir = args.templates_dir or config.prompts.templates_dir
        for name in TemplateStore(templates_dir).names():
            print(name)
        return

    orchestrator = Orchestrator(config=config)

    if args.command == "analyze":
        try:
            analysis = orchestrator.quick_analysis(args.path)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        if args.json:
            print(json.dumps(analysis.to_dict(), indent=2))
    elif args.command == "generate":
        try:
            result = orchestrator.generate(
                args.path,
                args.question,
                template=args.template,
                task_type=args.task,
                output_dir=args.output,
                save=not args.stdout,
            )
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except PromptWriteError as exc:
            parser.exit(2, f"{exc}\n")
        if args.stdout:
            print(_printable(result.prompt))
        else:
            saved = _relativize(Path(result.saved_path or ""))
            print(_printable(f"Prompt saved to {saved}"))
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _printable(text: str) -> str:
    # Undecodable file names print as "?" instead of failing the write.
    return text.encode("utf-8", "replace").decode("utf-8")


def _relativize(path: Path) -> str:
    try:
        return str(path.resolve().relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
