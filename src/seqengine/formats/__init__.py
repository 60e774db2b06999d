"""Sequence file formats."""

from .fasta import parse_fasta, to_fasta
from .genbank import parse_genbank, parse_location, to_genbank, records_to_genbank
from .detect import detect_file_format
from .validate import validate_and_clean_sequence

__all__ = [
    "parse_fasta",
    "to_fasta",
    "parse_genbank",
    "parse_location",
    "to_genbank",
    "records_to_genbank",
    "detect_file_format",
    "validate_and_clean_sequence",
]
