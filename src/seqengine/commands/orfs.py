"""List open reading frames."""

import time

import pandas as pd

from seqengine.analysis import find_orfs, translate
from seqengine.commands.common import read_records
from seqengine.utils import get_orf_params, parse_params, reverse_complement_dna

COLUMNS = ["record", "start", "end", "frame", "strand", "length", "aminoAcids", "startCodon", "stopCodon", "protein"]


def register(subparsers):
    """Register the orfs subcommand."""
    parser = subparsers.add_parser(
        "orfs",
        help="Find open reading frames on both strands",
        description="Six-frame ORF scan; ORFs are written longest first.",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input sequence file")
    parser.add_argument("--out", dest="output", required=True, help="Output CSV")
    parser.add_argument("--min-aa", type=int, default=None, help="Minimum ORF length in residues (default: 30)")
    parser.add_argument("--params", dest="param_file", default="", help="Parameters file")
    parser.set_defaults(func=run)


def run(args):
    """Run the orfs command."""
    params = parse_params(args.param_file) if args.param_file else {}
    min_aa = args.min_aa if args.min_aa is not None else get_orf_params(params)["min_amino_acids"]

    start_time = time.time()
    rows = []
    for record in read_records(args.input):
        for orf in find_orfs(record.sequence, min_aa):
            region = record.sequence[orf.start : orf.end]
            if orf.strand == -1:
                region = reverse_complement_dna(region)
            rows.append({"record": record.name, **orf.to_dict(), "protein": translate(region)})

    pd.DataFrame(rows, columns=COLUMNS).to_csv(args.output, index=False)
    runtime = time.time() - start_time
    print(f"Wrote {len(rows)} ORFs to {args.output} ({runtime:.1f} sec)")
