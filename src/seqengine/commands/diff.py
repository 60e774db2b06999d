"""Compare two sequences."""

import json

from seqengine.analysis import sequence_diff
from seqengine.commands.common import read_records


def register(subparsers):
    """Register the diff subcommand."""
    parser = subparsers.add_parser(
        "diff",
        help="Align two sequences and report differences",
        description="""
Globally align the first sequence of each input file and write the
segments, identity and gapped sequences as JSON.
""",
    )
    parser.add_argument("first", help="First sequence file")
    parser.add_argument("second", help="Second sequence file")
    parser.add_argument("--out", required=True, help="Output JSON")
    parser.set_defaults(func=run)


def run(args):
    """Run the diff command."""
    seq1 = read_records(args.first)[0].sequence
    seq2 = read_records(args.second)[0].sequence
    result = sequence_diff(seq1, seq2)

    with open(args.out, "w") as out:
        json.dump(result.to_dict(), out, indent=2)

    print(
        f"Identity {result.identity}% ({result.mismatches} mismatches, "
        f"{result.insertions} insertions, {result.deletions} deletions)"
    )
