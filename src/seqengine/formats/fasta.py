"""FASTA reading and writing."""

import re
from collections.abc import Iterable

from seqengine.types import FastaRecord

_STRIP = re.compile(r"[\s\d]")


def parse_fasta(text: str) -> list[FastaRecord]:
    """
    Parse FASTA text into records.

    The header splits on its first space into id and description. Sequence
    lines lose whitespace and digits. Sequence lines before any header form
    a record with an empty id.
    """
    records = []
    header = ""
    description = ""
    chunks: list[str] = []

    for line in text.splitlines():
        line = line.strip()
        if line.startswith(">"):
            if header or chunks:
                records.append(FastaRecord(header, description, "".join(chunks)))
            title = line[1:].strip()
            header, _, description = title.partition(" ")
            description = description.strip()
            chunks = []
        elif line:
            chunks.append(_STRIP.sub("", line))

    if header or chunks:
        records.append(FastaRecord(header, description, "".join(chunks)))
    return records


def to_fasta(records: Iterable[FastaRecord], line_width: int = 80) -> str:
    """Render records as FASTA with sequence lines wrapped at ``line_width``."""
    blocks = []
    for record in records:
        title = f"{record.header} {record.description}" if record.description else record.header
        lines = [f">{title}"]
        lines.extend(
            record.sequence[i : i + line_width] for i in range(0, len(record.sequence), line_width)
        )
        blocks.append("\n".join(lines))
    return "\n".join(blocks)
