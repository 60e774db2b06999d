"""Best-effort cleaning of pasted sequence text."""

import logging
import re

from seqengine.types import ValidationResult

logger = logging.getLogger(__name__)

DNA_CHARS = set("ATGCNRYSWKMBDHV")
RNA_CHARS = set("AUGCNRYSWKMBDHV")
PROTEIN_CHARS = set("ACDEFGHIKLMNPQRSTVWY*")

# Share of alphabet letters needed to commit to a sequence type
TYPE_THRESHOLD = 0.8

_STRIP = re.compile(r"[\s\d]")


def validate_and_clean_sequence(raw: str) -> ValidationResult:
    """
    Strip whitespace and digits, then drop letters foreign to the alphabet.

    The alphabet is RNA (U but no T), DNA (no U) or protein, whichever
    covers more than 80% of the text. Text that fits none is returned
    stripped but otherwise untouched. Removed characters are reported,
    never raised.
    """
    stripped = _STRIP.sub("", raw)
    if not stripped:
        return ValidationResult(cleaned="")

    upper = stripped.upper()
    total = len(upper)
    dna = sum(1 for ch in upper if ch in DNA_CHARS)
    rna = sum(1 for ch in upper if ch in RNA_CHARS)
    protein = sum(1 for ch in upper if ch in PROTEIN_CHARS)
    has_u = "U" in upper
    has_t = "T" in upper

    if has_u and not has_t and rna / total > TYPE_THRESHOLD:
        valid = RNA_CHARS
    elif not has_u and dna / total > TYPE_THRESHOLD:
        valid = DNA_CHARS
    elif protein / total > TYPE_THRESHOLD:
        valid = PROTEIN_CHARS
    else:
        return ValidationResult(cleaned=stripped)

    kept = []
    invalid = []
    for ch in stripped:
        if ch.upper() in valid:
            kept.append(ch)
        else:
            invalid.append(ch)

    if invalid:
        logger.debug("Removed %d invalid characters: %s", len(invalid), sorted(set(invalid)))
    return ValidationResult(
        cleaned="".join(kept),
        invalid_count=len(invalid),
        invalid_chars=list(dict.fromkeys(invalid)),
    )
