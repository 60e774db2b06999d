"""Pytest configuration and fixtures."""

import pytest

from seqengine.utils import FeatureIdGenerator

PUC19 = (
    "TCGCGCGTTTCGGTGATGACGGTGAAAACCTCTGACACATGCAGCTCCCGGAGACGGTCACAGCTTGTCTGTAAGCGGATGCCGGGAGCAGACAAGCCCG"
    "TCAGGGCGCGTCAGCGGGTGTTGGCGGGTGTCGGGGCTGGCTTAACTATGCGGCATCAGAGCAGATTGTACTGAGAGTGCACCATATGCGGTGTGAAATA"
    "CCGCACAGATGCGTAAGGAGAAAATACCGCATCAGGCGCCATTCGCCATTCAGGCTGCGCAACTGTTGGGAAGGGCGATCGGTGCGGGCCTCTTCGCTAT"
    "TACGCCAGCTGGCGAAAGGGGGATGTGCTGCAAGGCGATTAAGTTGGGTAACGCCAGGGTTTTCCCAGTCACGACGTTGTAAAACGACGGCCAGTGAATTC"
    "GAGCTCGGTACCCGGGGATCCTCTAGAGTCGACCTGCAGGCATGCAAGCTTGGCGTAATCATGGTCATAGCTGTTTCCTGTGTGAAATTGTTATCCGCTCA"
    "CAATTCCACACAACATACGAGCCGGAAGCATAAAGTGTAAAGCCTGGGGTGCCTAATGAGTGAGCTAACTCACATTAATTGCGTTGCGCTCACTGCCCGCT"
    "TTCCAGTCGGGAAACCTGTCGTGCCAGCTGCATTAATGAATCGGCCAACGCGCGGGGAGAGGCGGTTTGCGTATTGGGCGCTCTTCCGCTTCCTCGCTCAC"
    "TGACTCGCTGCGCTCGGTCGTTCGGCTGCGGCGAGCGGTATCAGCTCACTCAAAGGCGGTAATACGGTTATCCACAGAATCAGGGGATAACGCAGGAAAGA"
    "ACATGTGAGCAAAAGGCCAGCAAAAGGCCAGGAACCGTAAAAAGGCCGCGTTGCTGGCGTTTTTCCATAGGCTCCGCCCCCCTGACGAGCATCACAAAAAT"
    "CGACGCTCAAGTCAGAGGTGGCGAAACCCGACAGGACTATAAAGATACCAGGCGTTTCCCCCTGGAAGCTCCCTCGTGCGCTCTCCTGTTCCGACCCTGCC"
    "GCTTACCGGATACCTGTCCGCCTTTCTCCCTTCGGGAAGCGTGGCGCTTTCTCATAGCTCACGCTGTAGGTATCTCAGTTCGGTGTAGGTCGTTCGCTCCA"
    "AGCTGGGCTGTGTGCACGAACCCCCCGTTCAGCCCGACCGCTGCGCCTTATCCGGTAACTATCGTCTTGAGTCCAACCCGGTAAGACACGACTTATCGCCA"
    "CTGGCAGCAGCCACTGGTAAC"
)

# EcoRI site at 3 (cut 4), BamHI site at 13 (cut 14)
TWO_SITES = "AAAGAATTCAAAAGGATCCAAA"

# ATG + 29 lysine codons + TAA (30 residues); no other start codon on either strand
POLY_LYS_ORF = "ATG" + "AAA" * 29 + "TAA"


@pytest.fixture
def puc19():
    """Return a pUC19 fragment used as a realistic template."""
    return PUC19


@pytest.fixture
def two_site_sequence():
    """Return a short sequence with one EcoRI and one BamHI site."""
    return TWO_SITES


@pytest.fixture
def orf_sequence():
    """Return a sequence holding exactly one 30-residue ORF."""
    return POLY_LYS_ORF


@pytest.fixture
def id_factory():
    """Return a deterministic feature id generator."""
    return FeatureIdGenerator()


@pytest.fixture
def params_file(tmp_path):
    """Write a params file and return its path."""
    path = tmp_path / "params.txt"
    path.write_text(
        "## primer design\n"
        "PRIMER_MIN_LEN = 20\n"
        "PRIMER_MAX_LEN = 24\n"
        "TM_TARGET = 62\n"
        "\n"
        "# digest\n"
        "TOPOLOGY = circular\n"
        "ENZYMES = EcoRI, BamHI\n"
        "ORGANISM = yeast\n"
    )
    return path
