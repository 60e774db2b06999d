"""Design PCR primer pairs around a target region."""

import time

import pandas as pd

from seqengine.cloning import ENZYME_TAIL_PRESETS, design_primer_pair
from seqengine.commands.common import read_records
from seqengine.utils import get_primer_params, parse_params

TAILS = {preset["name"]: preset["tail"] for preset in ENZYME_TAIL_PRESETS}


def register(subparsers):
    """Register the primers subcommand."""
    parser = subparsers.add_parser(
        "primers",
        help="Design primer pairs for a target region",
        description="""
Enumerate forward primers starting at --start and reverse primers ending
at --end, filter them by Tm and GC content, and write the best
compatible pairs. 5' tails may be given as sequences or as one of the
enzyme presets (EcoRI, BamHI, HindIII, NcoI, XhoI, NdeI).
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input template sequence file")
    parser.add_argument("--out", dest="output", required=True, help="Output CSV of primer pairs")
    parser.add_argument("--start", type=int, required=True, help="Target start (0-indexed)")
    parser.add_argument("--end", type=int, required=True, help="Target end (0-indexed, exclusive)")
    parser.add_argument("--forward-tail", default=None, help="5' tail for the forward primer")
    parser.add_argument("--reverse-tail", default=None, help="5' tail for the reverse primer")
    parser.add_argument("--params", dest="param_file", default="", help="Parameters file")
    parser.set_defaults(func=run)


def _tail(value: str | None, default: str) -> str:
    if value is None:
        value = default
    return TAILS.get(value, value)


def run(args):
    """Run the primers command."""
    params = get_primer_params(parse_params(args.param_file) if args.param_file else {})
    forward_tail = _tail(args.forward_tail, params.pop("forward_tail"))
    reverse_tail = _tail(args.reverse_tail, params.pop("reverse_tail"))

    start_time = time.time()
    record = read_records(args.input)[0]
    pairs = design_primer_pair(
        record.sequence,
        args.start,
        args.end,
        forward_tail=forward_tail,
        reverse_tail=reverse_tail,
        **params,
    )

    rows = []
    for rank, pair in enumerate(pairs, start=1):
        rows.append({
            "rank": rank,
            "forward": pair.forward.full_sequence,
            "forward_tm": pair.forward.tm,
            "forward_gc": round(pair.forward.gc_percent, 1),
            "reverse": pair.reverse.full_sequence,
            "reverse_tm": pair.reverse.tm,
            "reverse_gc": round(pair.reverse.gc_percent, 1),
            "product_length": pair.product_length,
            "tm_difference": round(pair.tm_difference, 2),
        })

    columns = ["rank", "forward", "forward_tm", "forward_gc", "reverse", "reverse_tm", "reverse_gc",
               "product_length", "tm_difference"]
    pd.DataFrame(rows, columns=columns).to_csv(args.output, index=False)
    runtime = time.time() - start_time
    print(f"Wrote {len(rows)} primer pairs for {record.name} to {args.output} ({runtime:.1f} sec)")
