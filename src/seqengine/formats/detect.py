"""Sniff the format of uploaded or pasted sequence text."""

FILE_FORMATS = ("fasta", "genbank", "raw")


def detect_file_format(content: str) -> str:
    """Return "fasta", "genbank" or "raw" from the first non-blank text."""
    trimmed = content.lstrip()
    if trimmed.startswith(">"):
        return "fasta"
    if trimmed.startswith("LOCUS"):
        return "genbank"
    return "raw"
