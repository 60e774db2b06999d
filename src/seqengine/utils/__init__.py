"""Shared utility functions."""

from .sequences import (
    normalize_dna,
    reverse_complement_dna,
    complement_base,
    complement,
    reverse_complement,
)
from .params import (
    parse_params,
    get_primer_params,
    get_orf_params,
    get_digest_params,
    get_codon_params,
)
from .iupac import iupac_to_regex, compile_iupac, scan_overlapping
from .ids import FeatureIdGenerator, uuid_id

__all__ = [
    "normalize_dna",
    "reverse_complement_dna",
    "complement_base",
    "complement",
    "reverse_complement",
    "parse_params",
    "get_primer_params",
    "get_orf_params",
    "get_digest_params",
    "get_codon_params",
    "iupac_to_regex",
    "compile_iupac",
    "scan_overlapping",
    "FeatureIdGenerator",
    "uuid_id",
]
