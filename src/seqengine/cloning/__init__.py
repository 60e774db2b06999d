"""Restriction, digestion, ligation and primer design."""

from .restriction import (
    RESTRICTION_ENZYMES,
    ENZYME_TAIL_PRESETS,
    get_enzymes,
    find_restriction_sites,
    find_unique_cutters,
    find_non_cutters,
)
from .digest import digest_preview, restriction_digest
from .ligation import ligate
from .primers import (
    design_forward_primer,
    design_reverse_primer,
    design_primer_pair,
    primer_to_feature,
)

__all__ = [
    "RESTRICTION_ENZYMES",
    "ENZYME_TAIL_PRESETS",
    "get_enzymes",
    "find_restriction_sites",
    "find_unique_cutters",
    "find_non_cutters",
    "digest_preview",
    "restriction_digest",
    "ligate",
    "design_forward_primer",
    "design_reverse_primer",
    "design_primer_pair",
    "primer_to_feature",
]
