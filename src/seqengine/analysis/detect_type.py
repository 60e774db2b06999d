"""Guess whether raw text is DNA, RNA or protein."""

import re

DNA_ONLY = set("Tt")
RNA_ONLY = set("Uu")
IUPAC_DNA = set("ATGCNRYSWKMBDHVatgcnryswkmbdhv")
IUPAC_RNA = set("AUGCNRYSWKMBDHVaugcnryswkmbdhv")
# Amino acid letters that are not nucleotide codes
AA_ONLY = set("DEFHIKLMPQRVWdefhiklmpqrvw")
AMINO_ACIDS = set("ACDEFGHIKLMNPQRSTVWYacdefghiklmnpqrstvwy*")

# Fraction of unrecognised characters above which text is "misc"
MISC_THRESHOLD = 0.1

_STRIP = re.compile(r"[\s\d]")


def detect_sequence_type(raw: str) -> str:
    """
    Classify sequence text as dna, rna, protein, mixed, misc or unknown.

    Whitespace and digits are ignored. A, G, C, N alone count as DNA.
    """
    cleaned = _STRIP.sub("", raw)
    if not cleaned:
        return "unknown"

    chars = set(cleaned)
    has_dna_only = bool(chars & DNA_ONLY)
    has_rna_only = bool(chars & RNA_ONLY)
    has_aa_only = bool(chars & AA_ONLY)
    known = AMINO_ACIDS | IUPAC_DNA | IUPAC_RNA
    unknown_count = sum(1 for ch in cleaned if ch not in known)

    if unknown_count / len(cleaned) > MISC_THRESHOLD:
        return "misc"
    if has_aa_only:
        return "mixed" if has_dna_only or has_rna_only else "protein"
    if has_dna_only and has_rna_only:
        return "mixed"
    if has_rna_only:
        return "rna"
    if has_dna_only:
        return "dna"
    if chars <= IUPAC_DNA:
        return "dna"
    return "unknown"
