"""Sequence manipulation utilities."""

from Bio.Seq import Seq


def normalize_dna(seq: str) -> str:
    """Uppercase a nucleotide sequence and map RNA uracil to thymine."""
    return seq.upper().replace("U", "T")


def reverse_complement_dna(seq: str) -> str:
    """Return reverse-complement of a DNA sequence (IUPAC aware, case preserving)."""
    return str(Seq(seq).reverse_complement())


# IUPAC complement translation tables; unknown characters pass through
DNA_COMPLEMENT = str.maketrans(
    "ATGCRYSWKMBVDHN" "atgcryswkmbvdhn",
    "TACGYRSWMKVBHDN" "tacgyrswmkvbhdn",
)
RNA_COMPLEMENT = str.maketrans(
    "AUGCRYSWKMBVDHN" "augcryswkmbvdhn",
    "UACGYRSWMKVBHDN" "uacgyrswmkvbhdn",
)


def complement_base(base: str, is_rna: bool = False) -> str:
    """Return the complement of a single base."""
    return base.translate(RNA_COMPLEMENT if is_rna else DNA_COMPLEMENT)


def complement(seq: str, is_rna: bool = False) -> str:
    """Complement a sequence without reversing it."""
    return seq.translate(RNA_COMPLEMENT if is_rna else DNA_COMPLEMENT)


def reverse_complement(seq: str, is_rna: bool = False) -> str:
    """
    Reverse complement of a DNA or RNA sequence.

    DNA goes through Biopython; RNA uses the uracil table so that
    ``A`` pairs with ``U``.

    Args:
        seq: Nucleotide sequence (any case, IUPAC codes allowed)
        is_rna: Use the RNA alphabet for the complement

    Returns:
        Reverse complement with the input's case preserved
    """
    if is_rna:
        return complement(seq, is_rna=True)[::-1]
    return reverse_complement_dna(seq)
