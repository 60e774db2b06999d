"""Sequence analysis algorithms."""

from .composition import (
    nucleotide_composition,
    gc_content,
    at_content,
    gc_content_window,
    molecular_weight,
    protein_molecular_weight,
    melting_temperature,
    nearest_neighbor_tm,
)
from .codon_tables import (
    STANDARD_CODE,
    ECOLI_USAGE,
    HUMAN_USAGE,
    YEAST_USAGE,
    get_codon_usage,
    get_amino_acid_to_codons,
)
from .translation import (
    translate,
    translate_all_frames,
    translate_from_first_atg,
    reverse_translate,
    reverse_translate_all,
)
from .codon_optimize import codon_optimize, calculate_cai
from .orfs import find_orfs, find_longest_orf
from .motifs import find_motif
from .alignment import sequence_diff
from .detect_type import detect_sequence_type
from .mutate import apply_substitution, apply_insertion, apply_deletion
from .annotate import auto_annotate, annotate_to_features

__all__ = [
    "nucleotide_composition",
    "gc_content",
    "at_content",
    "gc_content_window",
    "molecular_weight",
    "protein_molecular_weight",
    "melting_temperature",
    "nearest_neighbor_tm",
    "STANDARD_CODE",
    "ECOLI_USAGE",
    "HUMAN_USAGE",
    "YEAST_USAGE",
    "get_codon_usage",
    "get_amino_acid_to_codons",
    "translate",
    "translate_all_frames",
    "translate_from_first_atg",
    "reverse_translate",
    "reverse_translate_all",
    "codon_optimize",
    "calculate_cai",
    "find_orfs",
    "find_longest_orf",
    "find_motif",
    "sequence_diff",
    "detect_sequence_type",
    "apply_substitution",
    "apply_insertion",
    "apply_deletion",
    "auto_annotate",
    "annotate_to_features",
]
