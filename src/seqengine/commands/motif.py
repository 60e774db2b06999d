"""Search sequences for an IUPAC motif."""

import pandas as pd

from seqengine.analysis import find_motif
from seqengine.commands.common import read_records


def register(subparsers):
    """Register the motif subcommand."""
    parser = subparsers.add_parser(
        "motif",
        help="Find all (overlapping) occurrences of a motif",
        description="Pattern letters follow IUPAC codes, e.g. GANTC or RTG.",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input sequence file")
    parser.add_argument("--pattern", required=True, help="Motif pattern")
    parser.add_argument("--out", dest="output", required=True, help="Output CSV")
    parser.set_defaults(func=run)


def run(args):
    """Run the motif command."""
    rows = []
    for record in read_records(args.input):
        for match in find_motif(record.sequence, args.pattern):
            rows.append({"record": record.name, **match.to_dict()})

    pd.DataFrame(rows, columns=["record", "start", "end", "matched"]).to_csv(args.output, index=False)
    print(f"Found {len(rows)} matches of {args.pattern} in {args.input}")
