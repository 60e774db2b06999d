"""Six-frame open reading frame search."""

import bisect

from seqengine.analysis.codon_tables import STANDARD_CODE
from seqengine.types import ORF, CodonTable
from seqengine.utils.sequences import normalize_dna, reverse_complement_dna


def _orfs_in_frame(
    seq: str,
    frame_offset: int,
    strand: int,
    table: CodonTable,
    min_amino_acids: int,
) -> list[ORF]:
    """Pair every start codon in one frame with its nearest downstream stop."""
    starts = set(table.starts)
    stops = set(table.stops)
    start_positions = []
    stop_positions = []
    for i in range(frame_offset, len(seq) - 2, 3):
        codon = seq[i : i + 3]
        if codon in starts:
            start_positions.append(i)
        if codon in stops:
            stop_positions.append(i)

    frame = frame_offset % 3 + 1
    orfs = []
    for start in start_positions:
        idx = bisect.bisect_right(stop_positions, start)
        if idx < len(stop_positions):
            stop = stop_positions[idx]
            bp_length = stop + 3 - start
            aa_length = bp_length // 3 - 1
            end = stop + 3
            stop_codon = seq[stop:end]
        else:
            # Runs off the end: no stop codon
            bp_length = len(seq) - start
            aa_length = bp_length // 3
            end = len(seq)
            stop_codon = ""
        if aa_length >= min_amino_acids:
            orfs.append(
                ORF(
                    start=start,
                    end=end,
                    frame=frame,
                    strand=strand,
                    length=bp_length,
                    amino_acids=aa_length,
                    start_codon=seq[start : start + 3],
                    stop_codon=stop_codon,
                )
            )
    return orfs


def find_orfs(
    seq: str,
    min_amino_acids: int = 30,
    table: CodonTable = STANDARD_CODE,
) -> list[ORF]:
    """
    Find ORFs in all three frames of both strands.

    Reverse-strand hits are reported in forward-strand coordinates.

    Args:
        seq: DNA or RNA sequence
        min_amino_acids: Minimum protein length, stop excluded
        table: Codon table supplying start and stop codons

    Returns:
        ORFs sorted by nucleotide length, longest first
    """
    dna = normalize_dna(seq)
    rev = reverse_complement_dna(dna)
    n = len(dna)

    orfs = []
    for frame in range(3):
        orfs.extend(_orfs_in_frame(dna, frame, 1, table, min_amino_acids))
    for frame in range(3):
        for orf in _orfs_in_frame(rev, frame, -1, table, min_amino_acids):
            orf.start, orf.end = n - orf.end, n - orf.start
            orfs.append(orf)

    orfs.sort(key=lambda orf: orf.length, reverse=True)
    return orfs


def find_longest_orf(seq: str, table: CodonTable = STANDARD_CODE) -> ORF | None:
    """Longest ORF of at least one residue, or None."""
    orfs = find_orfs(seq, 1, table)
    return orfs[0] if orfs else None
