"""IUPAC-aware motif search for DNA, RNA and protein sequences."""

from seqengine.types import MotifMatch
from seqengine.utils.iupac import IUPAC_MOTIF_CLASSES, compile_iupac, scan_overlapping


def find_motif(seq: str, pattern: str) -> list[MotifMatch]:
    """
    Find every occurrence of ``pattern`` in ``seq``, overlaps included.

    Ambiguity letters expand to their base sets (R -> [AG]); other
    characters match literally, case-insensitively.
    """
    if not seq or not pattern:
        return []
    regex = compile_iupac(pattern, IUPAC_MOTIF_CLASSES)
    if regex is None:
        return []
    upper = seq.upper()
    return [
        MotifMatch(start=m.start(), end=m.end(), matched=m.group())
        for m in scan_overlapping(regex, upper)
    ]
