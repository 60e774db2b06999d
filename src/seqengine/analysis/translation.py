"""Forward translation and frequency-guided back-translation."""

from seqengine.analysis.codon_tables import (
    ECOLI_USAGE,
    STANDARD_CODE,
    UNKNOWN_CODON,
    best_codon,
    ranked_codons,
)
from seqengine.types import CodonTable, CodonUsage
from seqengine.utils.sequences import normalize_dna

UNKNOWN_RESIDUE = "X"
STOP = "*"


def translate(
    seq: str,
    frame: int = 0,
    table: CodonTable = STANDARD_CODE,
    stop_at_first: bool = False,
) -> str:
    """
    Translate a DNA or RNA sequence into one-letter amino acids.

    Args:
        seq: Nucleotide sequence
        frame: Reading frame offset (0, 1 or 2)
        table: Codon table
        stop_at_first: Halt right after the first stop codon (``*`` kept)

    Returns:
        Protein string; codons missing from the table become ``X``
    """
    dna = normalize_dna(seq)
    protein = []
    for i in range(frame, len(dna) - 2, 3):
        aa = table.codons.get(dna[i : i + 3], UNKNOWN_RESIDUE)
        protein.append(aa)
        if aa == STOP and stop_at_first:
            break
    return "".join(protein)


def translate_all_frames(seq: str, table: CodonTable = STANDARD_CODE) -> tuple[str, str, str]:
    """Translate the three forward reading frames."""
    return (
        translate(seq, 0, table),
        translate(seq, 1, table),
        translate(seq, 2, table),
    )


def translate_from_first_atg(seq: str, table: CodonTable = STANDARD_CODE) -> str | None:
    """Translate from the first ATG/AUG to the first stop, or None without a start."""
    dna = normalize_dna(seq)
    atg = dna.find("ATG")
    if atg == -1:
        return None
    return translate(dna[atg:], 0, table, stop_at_first=True)


def reverse_translate(protein: str, usage: CodonUsage = ECOLI_USAGE) -> str:
    """Back-translate with the most frequent codon per residue, halting at ``*``."""
    codons = []
    for aa in protein.upper():
        if aa == STOP:
            break
        codons.append(best_codon(aa, usage))
    return "".join(codons)


def reverse_translate_all(protein: str, usage: CodonUsage = ECOLI_USAGE) -> list[list[str]]:
    """Ranked codon choices per residue, halting at ``*``."""
    ranked = ranked_codons(usage)
    result = []
    for aa in protein.upper():
        if aa == STOP:
            break
        choices = ranked.get(aa)
        result.append(list(choices) if choices else [UNKNOWN_CODON])
    return result
