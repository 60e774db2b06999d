"""Convert between FASTA and GenBank."""

from seqengine.commands.common import read_records
from seqengine.formats import records_to_genbank, to_fasta
from seqengine.types import FastaRecord, GenBankRecord


def register(subparsers):
    """Register the convert subcommand."""
    parser = subparsers.add_parser(
        "convert",
        help="Convert sequence files between FASTA and GenBank",
        description="Read FASTA, GenBank or raw text and write the requested format.",
    )
    parser.add_argument("--in", dest="input", required=True, help="Input sequence file")
    parser.add_argument("--out", dest="output", required=True, help="Output file")
    parser.add_argument("--to", dest="fmt", choices=["fasta", "genbank"], required=True, help="Output format")
    parser.add_argument("--width", type=int, default=80, help="FASTA line width (default: 80)")
    parser.set_defaults(func=run)


def run(args):
    """Run the convert command."""
    records = read_records(args.input)
    if args.fmt == "fasta":
        text = to_fasta(
            [FastaRecord(r.name, r.description, r.sequence) for r in records],
            line_width=args.width,
        )
    else:
        text = records_to_genbank(
            GenBankRecord(
                name=r.name,
                length=len(r.sequence),
                topology=r.topology,
                molecule_type="DNA",
                features=r.features,
                sequence=r.sequence,
                definition=r.description or None,
            )
            for r in records
        )

    with open(args.output, "w") as fout:
        fout.write(text + "\n")
    print(f"Wrote {len(records)} records to {args.output}")
