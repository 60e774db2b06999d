"""IUPAC ambiguity expansion and overlapping pattern scanning."""

import re
from collections.abc import Iterator


# Nucleotide ambiguity codes as regex character classes
IUPAC_DNA_CLASSES = {
    "A": "A", "C": "C", "G": "G", "T": "T",
    "R": "[AG]", "Y": "[CT]", "S": "[GC]", "W": "[AT]",
    "K": "[GT]", "M": "[AC]", "B": "[CGT]", "D": "[AGT]",
    "H": "[ACT]", "V": "[ACG]", "N": "[ACGT]",
}

# Motif search also accepts RNA, so U is literal and N covers it
IUPAC_MOTIF_CLASSES = {**IUPAC_DNA_CLASSES, "U": "U", "N": "[ACGTU]"}


def iupac_to_regex(pattern: str, classes: dict[str, str] = IUPAC_DNA_CLASSES) -> str:
    """
    Expand an IUPAC pattern into a regular expression string.

    Letters outside ``classes`` are escaped and matched literally, so
    protein motifs pass through unchanged.
    """
    return "".join(classes.get(ch, re.escape(ch)) for ch in pattern.upper())


def compile_iupac(
    pattern: str,
    classes: dict[str, str] = IUPAC_DNA_CLASSES,
    flags: int = re.IGNORECASE,
) -> re.Pattern | None:
    """Compile an IUPAC pattern, returning None when it cannot form a matcher."""
    if not pattern:
        return None
    try:
        return re.compile(iupac_to_regex(pattern, classes), flags)
    except re.error:
        return None


def scan_overlapping(regex: re.Pattern, seq: str) -> Iterator[re.Match]:
    """
    Yield every match of ``regex`` in ``seq``, overlapping ones included.

    After a hit at position p the scan resumes at p + 1, so "AA" finds
    three hits in "AAAA".
    """
    pos = 0
    n = len(seq)
    while pos < n:
        match = regex.search(seq, pos)
        if match is None:
            return
        yield match
        pos = match.start() + 1
