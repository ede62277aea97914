"""CLI entrypoints for msgforge commands."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Any, Dict

from . import __version__
from .compiler import Compiler
from .config import ConfigurationError, MsgForgeConfig, load_config, write_default_config
from .logging import configure_logging


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


def _add_config_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-c",
        "--config",
        default=".",
        help="Path to .msgforge.yml or the directory containing it (defaults to current directory).",
    )


def _add_input_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-i",
        "--input",
        dest="messages_dir",
        help="Directory containing translation JSON files (overrides config).",
    )


def _add_log_file_option(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Also write a DEBUG-level log of the run to this file.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="msgforge",
        description="Compile JSON translations into Python accessor functions.",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    compile_parser = subparsers.add_parser(
        "compile",
        help="Compile translations into a generated Python package.",
    )
    _add_verbose_option(compile_parser, suppress_default=True)
    _add_config_option(compile_parser)
    _add_input_option(compile_parser)
    _add_log_file_option(compile_parser)
    compile_parser.add_argument(
        "-o",
        "--output",
        dest="output_dir",
        help="Output directory for the generated package (overrides config).",
    )
    compile_parser.add_argument(
        "-l",
        "--locales",
        type=_split_locales,
        help="Comma-separated list of locales (overrides config).",
    )
    compile_parser.add_argument(
        "--no-validate",
        dest="validate_translations",
        action="store_const",
        const=False,
        default=None,
        help="Skip translation validation; missing values fall back to the default locale.",
    )
    compile_parser.add_argument(
        "--no-namespaces",
        dest="generate_namespaces",
        action="store_const",
        const=False,
        default=None,
        help="Don't generate namespace objects.",
    )

    check_parser = subparsers.add_parser(
        "check",
        help="Validate translations without compiling.",
    )
    _add_verbose_option(check_parser, suppress_default=True)
    _add_config_option(check_parser)
    _add_input_option(check_parser)
    _add_log_file_option(check_parser)

    info_parser = subparsers.add_parser(
        "info",
        help="Display the effective configuration.",
    )
    _add_verbose_option(info_parser, suppress_default=True)
    _add_config_option(info_parser)

    init_parser = subparsers.add_parser(
        "init",
        help="Create a starter .msgforge.yml.",
    )
    _add_verbose_option(init_parser, suppress_default=True)
    init_parser.add_argument(
        "-d",
        "--dir",
        default=".",
        help="Directory to create the config file in (defaults to current directory).",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for msgforge commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=bool(args.verbose), log_file=getattr(args, "log_file", None))

    if args.command == "init":
        try:
            config_path = write_default_config(Path(args.dir))
        except FileExistsError as exc:
            parser.exit(1, f"Error: {exc}\n")
        print(f"Created config file at {_relativize(config_path)}")
        print("Next steps:")
        print("  1. Update the config with your locales and paths")
        print("  2. Create your messages directory with <locale>.json files")
        print("  3. Run `msgforge compile` to generate accessor functions")
        return

    try:
        config = load_config(Path(args.config), _collect_overrides(args))
    except ConfigurationError as exc:
        parser.exit(1, f"Failed to load configuration: {exc}\n")

    if args.command == "info":
        print(_describe_config(config))
    elif args.command == "check":
        try:
            summary = Compiler().run_check(config)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except RuntimeError as exc:
            parser.exit(1, f"Validation failed:\n{exc}\nRun with --verbose for more details.\n")
        print(f"All translations are valid ({len(summary)} message group(s) checked).")
    elif args.command == "compile":
        try:
            result = Compiler().run_compile(config)
        except (FileNotFoundError, NotADirectoryError) as exc:
            parser.exit(1, f"{exc}\n")
        except RuntimeError as exc:
            parser.exit(
                1, f"msgforge compile failed:\n{exc}\nRun with --verbose for more details.\n"
            )
        print(
            f"Compiled {len(result.groups)} message group(s) into {_relativize(result.output_dir)}"
        )
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _collect_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    keys = (
        "messages_dir",
        "output_dir",
        "locales",
        "validate_translations",
        "generate_namespaces",
    )
    return {key: getattr(args, key) for key in keys if getattr(args, key, None) is not None}


def _split_locales(value: str) -> list[str]:
    return [locale.strip() for locale in value.split(",") if locale.strip()]


def _describe_config(config: MsgForgeConfig) -> str:
    lines = [
        "Current configuration:",
        f"  Locales:               {', '.join(config.locales)}",
        f"  Default locale:        {config.default_locale}",
        f"  Messages directory:    {config.messages_dir}",
        f"  Output directory:      {config.output_dir}",
        f"  Validate translations: {'yes' if config.validate_translations else 'no'}",
        f"  Generate namespaces:   {'yes' if config.generate_namespaces else 'no'}",
    ]
    if config.exclude_paths:
        lines.append(f"  Exclude paths:         {', '.join(config.exclude_paths)}")
    return "\n".join(lines)


def _relativize(path: Path) -> str:
    try:
        return str(path.relative_to(Path.cwd()))
    except ValueError:
        return str(path)


if __name__ == "__main__":
    main(sys.argv[1:])
