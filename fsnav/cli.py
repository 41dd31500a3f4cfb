from __future__ import annotations

import argparse
import json
from pathlib import Path
from typing import Sequence

from fsnav import __version__
from fsnav.core.app import main as run_app
from fsnav.core.config import RuntimeConfig, get_runtime_config
from fsnav.core.logging import configure_logging
from fsnav.core.path_navigation import is_navigable_directory
from fsnav.core.paths import LOG_FILENAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fsnav",
        description="fsnav - browse and manage files from the terminal",
    )

    parser.add_argument(
        "path",
        nargs="?",
        help="Directory to start in. Defaults to the current working directory.",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
        help="Print version and exit.",
    )

    parser.add_argument(
        "--print-config",
        action="store_true",
        help="Print the resolved runtime config as JSON and exit.",
    )

    return parser


def handle_print_config(config: RuntimeConfig) -> None:
    payload = {
        "runtime": config.model_dump(mode="json"),
        "log_path": str(config.log_dir / LOG_FILENAME),
    }
    print(json.dumps(payload, indent=2))


def resolve_start_path(raw: str | None) -> Path:
    start = Path(raw).expanduser() if raw else Path.cwd()
    start = start.resolve()
    if not is_navigable_directory(start):
        raise SystemExit(f"Not a directory: {start}")
    return start


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = get_runtime_config()

    if args.print_config:
        handle_print_config(config)
        return

    start_path = resolve_start_path(args.path)
    configure_logging(
        level=config.log_level,
        format_name=config.log_format,
        log_dir=config.log_dir if config.log_to_file else None,
    )
    raise SystemExit(run_app(start_path, config=config))


if __name__ == "__main__":
    main()
