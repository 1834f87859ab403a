"""Command-line front door for vdfpack.

Resolves the input to either a directory (legacy mode) or a YAML build script.
Then builds the volume in memory and writes it in one pass.
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from .config import load_default_comment, load_legacy_output_name
from .errors import VdfpackError
from .file_tree import build_file_tree, build_filtered_file_tree
from .script import load_script, resolve_script
from .volume import VolumeArchive, build_volume, describe_volume, write_volume

logger = logging.getLogger(__name__)

LOG_FORMAT = "[%(levelname)s] %(message)s"


def _configure_logging(verbose: bool, quiet: bool) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr, force=True)


def build_from_directory(
    directory: Path,
    output_path: Path | None = None,
    comment: str | None = None,
) -> tuple[VolumeArchive, Path]:
    """Legacy mode: pack all of ``directory``.

    Output defaults to ``directory / <legacy output name>``.
    """
    archive = build_volume(
        build_file_tree(directory),
        comment if comment is not None else load_default_comment(),
    )
    if output_path is None:
        output_path = directory / load_legacy_output_name()
    return archive, output_path


def build_from_script(
    script_path: Path,
    base_dir_override: Path | None = None,
    output_override: Path | None = None,
    comment_override: str | None = None,
) -> tuple[VolumeArchive, Path]:
    """Script mode: pack the include-glob selection declared in ``script_path``."""
    started = time.perf_counter()
    logger.info("Generating archive: %s", script_path)
    resolved = resolve_script(
        load_script(script_path),
        base_dir_override=base_dir_override,
        output_override=output_override,
        comment_override=comment_override,
        default_comment=load_default_comment(),
    )
    tree = build_filtered_file_tree(resolved.base_dir, resolved.depth_filter)
    archive = build_volume(tree, resolved.comment)
    logger.info("Done: %.2fs", time.perf_counter() - started)
    return archive, resolved.output_path


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, build the volume and write it.

    ``argv`` is primarily for tests; when omitted ``sys.argv`` is used.
    Usage and build errors end the process through ``SystemExit``.
    """
    parser = argparse.ArgumentParser(
        prog="vdfpack",
        description="Pack a directory into a catalog-based game volume (.vdf).",
    )
    parser.add_argument("input", help="YAML build script or base directory.")
    parser.add_argument(
        "-b",
        "--base-directory",
        metavar="DIR",
        type=Path,
        default=None,
        help="Base directory override (script mode).",
    )
    parser.add_argument("-o", "--output-file", metavar="FILE", type=Path, default=None, help="Output file override.")
    parser.add_argument("-c", "--comment", default=None, help="Comment to be added to the volume.")
    parser.add_argument("-l", "--list", action="store_true", help="Print the built catalog to stdout.")
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    args = parser.parse_args(argv)

    _configure_logging(args.verbose, args.quiet)

    if not args.input:
        raise SystemExit("Please provide a yaml file or a base directory.")
    path = Path(args.input)

    try:
        if path.is_dir():
            archive, output_path = build_from_directory(path, args.output_file, args.comment)
        elif path.is_file():
            archive, output_path = build_from_script(path, args.base_directory, args.output_file, args.comment)
        else:
            raise SystemExit(f"Path not found: {path}")
    except VdfpackError as exc:
        raise SystemExit(f"Error: {exc}") from exc

    try:
        write_volume(archive, output_path)
    except OSError as exc:
        raise SystemExit(f"Error writing volume: {exc}") from exc

    if args.list:
        sys.stdout.write(describe_volume(archive))


if __name__ == "__main__":
    main()
