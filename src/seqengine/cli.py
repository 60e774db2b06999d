#!/usr/bin/env python
"""seqengine - sequence analysis and cloning CLI."""

import argparse
import logging
import sys

from seqengine import __version__


def main(argv=None):
    """Main entry point for the seqengine CLI."""
    parser = argparse.ArgumentParser(
        prog="seqengine",
        description="Sequence analysis, restriction cloning and primer design",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  seqengine analyze --in plasmid.gb --out stats.csv --features features.csv
  seqengine digest --in pUC19.fa --enzymes EcoRI BamHI --topology circular --out fragments.csv
  seqengine primers --in insert.fa --start 0 --end 600 --forward-tail EcoRI --out primers.csv
  seqengine diff before.fa after.fa --out diff.json

For more information on a specific command:
  seqengine <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from seqengine.commands import (
        analyze,
        orfs,
        digest,
        primers,
        diff,
        motif,
        translate,
        optimize,
        convert,
    )

    analyze.register(subparsers)
    orfs.register(subparsers)
    digest.register(subparsers)
    primers.register(subparsers)
    diff.register(subparsers)
    motif.register(subparsers)
    translate.register(subparsers)
    optimize.register(subparsers)
    convert.register(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
