"""Input helpers shared by the subcommands."""

from dataclasses import dataclass, field
from pathlib import Path

from seqengine.formats import detect_file_format, parse_fasta, parse_genbank, validate_and_clean_sequence
from seqengine.types import Feature


@dataclass
class InputRecord:
    name: str
    sequence: str
    topology: str = "linear"
    features: list[Feature] = field(default_factory=list)
    description: str = ""


def read_records(path: str | Path) -> list[InputRecord]:
    """
    Load FASTA, GenBank or raw sequence text from a file.

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file holds no sequence
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    text = path.read_text()

    fmt = detect_file_format(text)
    if fmt == "fasta":
        records = [
            InputRecord(name=r.header or path.stem, sequence=r.sequence, description=r.description)
            for r in parse_fasta(text)
        ]
    elif fmt == "genbank":
        records = [
            InputRecord(
                name=r.name,
                sequence=r.sequence.upper(),
                topology=r.topology,
                features=r.features,
                description=r.definition or "",
            )
            for r in parse_genbank(text)
        ]
    else:
        cleaned = validate_and_clean_sequence(text)
        if cleaned.invalid_count:
            print(f">> Removed {cleaned.invalid_count} invalid characters from {path}")
        records = [InputRecord(name=path.stem, sequence=cleaned.cleaned)] if cleaned.cleaned else []

    if not records:
        raise ValueError(f"No sequences found in {path}")
    return records
