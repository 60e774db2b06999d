"""Translate nucleotide sequences or back-translate proteins."""

from seqengine.analysis import get_codon_usage, reverse_translate, translate
from seqengine.commands.common import read_records
from seqengine.formats import to_fasta
from seqengine.types import FastaRecord


def register(subparsers):
    """Register the translate subcommand."""
    parser = subparsers.add_parser(
        "translate",
        help="Translate DNA/RNA to protein, or protein back to DNA",
        description="""
Translate each input sequence in the chosen frame. With --reverse, treat
inputs as proteins and back-translate them with the organism's most
frequent codons.
""",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input sequence file")
    parser.add_argument("--out", dest="output", required=True, help="Output FASTA")
    parser.add_argument("--frame", type=int, choices=[0, 1, 2], default=0, help="Reading frame (default: 0)")
    parser.add_argument("--to-stop", action="store_true", help="Stop after the first stop codon")
    parser.add_argument("--reverse", action="store_true", help="Back-translate protein input")
    parser.add_argument("--organism", choices=["ecoli", "human", "yeast"], default="ecoli")
    parser.set_defaults(func=run)


def run(args):
    """Run the translate command."""
    usage = get_codon_usage(args.organism)
    out = []
    for record in read_records(args.input):
        if args.reverse:
            seq = reverse_translate(record.sequence, usage)
        else:
            seq = translate(record.sequence, args.frame, stop_at_first=args.to_stop)
        out.append(FastaRecord(record.name, record.description, seq))

    with open(args.output, "w") as fout:
        fout.write(to_fasta(out) + "\n")
    print(f"Wrote {len(out)} sequences to {args.output}")
