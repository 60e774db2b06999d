"""Pairwise sequence comparison by global alignment."""

import logging

import numpy as np

from seqengine.types import DiffResult, DiffSegment

logger = logging.getLogger(__name__)

MATCH_SCORE = 2
MISMATCH_SCORE = -1
GAP_SCORE = -2

# Largest (len1 * len2) scored with the full matrix
MAX_NW_CELLS = 25_000_000

GAP = "-"


def sequence_diff(seq1: str, seq2: str) -> DiffResult:
    """
    Compare two sequences column by column.

    Uses Needleman-Wunsch global alignment, or a positional comparison
    when the score matrix would exceed ``MAX_NW_CELLS``. "insertion"
    marks a gap in ``seq1`` and "deletion" a gap in ``seq2``.
    """
    s1 = seq1.upper()
    s2 = seq2.upper()
    if len(s1) * len(s2) > MAX_NW_CELLS:
        logger.info(
            "Alignment of %d x %d exceeds %d cells; using positional comparison",
            len(s1), len(s2), MAX_NW_CELLS,
        )
        return _build_result(*positional_alignment(s1, s2))
    return _build_result(*needleman_wunsch(s1, s2))


def _score_matrix(seq1: str, seq2: str) -> np.ndarray:
    """Fill the (m+1) x (n+1) global alignment score matrix row by row."""
    m, n = len(seq1), len(seq2)
    score = np.empty((m + 1, n + 1), dtype=np.int32)
    cols = np.arange(n + 1, dtype=np.int32)
    score[0] = cols * GAP_SCORE

    codes2 = np.array([ord(ch) for ch in seq2], dtype=np.int32)
    best = np.empty(n + 1, dtype=np.int32)
    for i in range(1, m + 1):
        prev = score[i - 1]
        substitution = np.where(codes2 == ord(seq1[i - 1]), MATCH_SCORE, MISMATCH_SCORE)
        best[0] = i * GAP_SCORE
        np.maximum(prev[:-1] + substitution, prev[1:] + GAP_SCORE, out=best[1:])
        # Horizontal gaps: row[j] = max_k(best[k] + GAP * (j - k))
        score[i] = np.maximum.accumulate(best - GAP_SCORE * cols) + GAP_SCORE * cols
    return score


def needleman_wunsch(seq1: str, seq2: str) -> tuple[str, str]:
    """
    Globally align two sequences.

    Traceback prefers the diagonal, then a gap in ``seq2`` (up), then a
    gap in ``seq1`` (left) when scores tie.

    Returns:
        The two gapped sequences, of equal length
    """
    score = _score_matrix(seq1, seq2)
    aligned1 = []
    aligned2 = []
    i, j = len(seq1), len(seq2)
    while i > 0 or j > 0:
        current = score[i, j]
        if i > 0 and j > 0:
            sub = MATCH_SCORE if seq1[i - 1] == seq2[j - 1] else MISMATCH_SCORE
            if current == score[i - 1, j - 1] + sub:
                aligned1.append(seq1[i - 1])
                aligned2.append(seq2[j - 1])
                i -= 1
                j -= 1
                continue
        if i > 0 and current == score[i - 1, j] + GAP_SCORE:
            aligned1.append(seq1[i - 1])
            aligned2.append(GAP)
            i -= 1
        else:
            aligned1.append(GAP)
            aligned2.append(seq2[j - 1])
            j -= 1
    return "".join(reversed(aligned1)), "".join(reversed(aligned2))


def positional_alignment(seq1: str, seq2: str) -> tuple[str, str]:
    """Align by position and pad the shorter sequence with trailing gaps."""
    width = max(len(seq1), len(seq2))
    return seq1.ljust(width, GAP), seq2.ljust(width, GAP)


def _classify(c1: str, c2: str) -> str:
    if c1 == GAP:
        return "insertion"
    if c2 == GAP:
        return "deletion"
    return "match" if c1 == c2 else "mismatch"


def _build_result(aligned1: str, aligned2: str) -> DiffResult:
    """Run-length encode aligned columns into segments and count them."""
    counts = {"match": 0, "mismatch": 0, "insertion": 0, "deletion": 0}
    segments: list[DiffSegment] = []
    pos1 = pos2 = 0
    current = None

    for c1, c2 in zip(aligned1, aligned2):
        op = _classify(c1, c2)
        counts[op] += 1
        if current is None or current.op != op:
            current = DiffSegment(
                op=op, seq1_start=pos1, seq2_start=pos2,
                seq1_text="", seq2_text="", length=0,
            )
            segments.append(current)
        current.seq1_text += c1
        current.seq2_text += c2
        current.length += 1
        if c1 != GAP:
            pos1 += 1
        if c2 != GAP:
            pos2 += 1

    aligned_pairs = counts["match"] + counts["mismatch"]
    identity = counts["match"] / aligned_pairs * 100 if aligned_pairs else 0.0
    return DiffResult(
        segments=segments,
        identity=round(identity, 1),
        mismatches=counts["mismatch"],
        insertions=counts["insertion"],
        deletions=counts["deletion"],
        aligned1=aligned1,
        aligned2=aligned2,
    )
