"""Command-line entry point: print bundle descriptors as JSON."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

from bundlemeta.config import load_bundle_properties
from bundlemeta.errors import BundleMetaError
from bundlemeta.logging import setup_logging
from bundlemeta.reader import read_bundle_descriptor


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bundlemeta",
        description="Read META-INF/MANIFEST.MF from bundle directories or archives and print their descriptors.",
    )
    parser.add_argument("paths", nargs="+", type=Path, help="Bundle directories or archive files")
    parser.add_argument("--prefix", help="Identity key prefix (overrides meta_id_prefix from config)")
    parser.add_argument("--archive-extension", help="Bundle archive extension (overrides config)")
    parser.add_argument("--config", type=Path, help="Path to a bundlemeta.toml config file")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.WARNING, name="bundlemeta")

    overrides = {}
    if args.prefix is not None:
        overrides["meta_id_prefix"] = args.prefix
    if args.archive_extension is not None:
        overrides["archive_extension"] = args.archive_extension
    try:
        properties = load_bundle_properties(args.config, overrides)
    except (OSError, ValueError) as e:
        print(f"Error: could not load config: {e}", file=sys.stderr)
        return 1

    failed = 0
    for path in args.paths:
        try:
            descriptor = read_bundle_descriptor(path, properties)
        except BundleMetaError as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            failed += 1
            continue
        print(descriptor.model_dump_json(indent=2))
    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
