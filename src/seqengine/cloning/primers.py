"""PCR primer candidate enumeration and pairing."""

import re

from seqengine.analysis.composition import gc_content, melting_temperature, nearest_neighbor_tm
from seqengine.types import Feature, PrimerCandidate, PrimerPair
from seqengine.utils.ids import IdFactory, uuid_id
from seqengine.utils.sequences import reverse_complement_dna

DEFAULT_MIN_LENGTH = 18
DEFAULT_MAX_LENGTH = 28
DEFAULT_TARGET_TM = 60.0
DEFAULT_TM_TOLERANCE = 3.0
DEFAULT_MIN_GC = 0.30
DEFAULT_MAX_GC = 0.70
DEFAULT_MAX_TM_DIFF = 5.0
DEFAULT_MAX_PAIRS = 10

PRIMER_COLOR = "#a78bfa"

_NON_ACGT = re.compile(r"[^ACGT]")


def _clean_tail(tail: str) -> str:
    return _NON_ACGT.sub("", tail.upper())


def _candidate(
    binding: str,
    tail: str,
    start: int,
    end: int,
    direction: str,
    min_gc: float,
    max_gc: float,
    target_tm: float,
    tm_tolerance: float,
) -> PrimerCandidate | None:
    """Score one binding region; None when it fails the Tm or GC window."""
    tm = melting_temperature(binding)
    if tm is None:
        return None
    gc = gc_content(binding)
    if gc < min_gc or gc > max_gc:
        return None
    if abs(tm - target_tm) > tm_tolerance:
        return None
    return PrimerCandidate(
        sequence=binding,
        full_sequence=tail + binding,
        tail=tail,
        start=start,
        end=end,
        length=len(binding),
        full_length=len(tail) + len(binding),
        tm=tm,
        gc_percent=gc * 100,
        direction=direction,
        tm_nn=nearest_neighbor_tm(binding),
    )


def design_forward_primer(
    seq: str,
    target_start: int,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    target_tm: float = DEFAULT_TARGET_TM,
    tm_tolerance: float = DEFAULT_TM_TOLERANCE,
    min_gc: float = DEFAULT_MIN_GC,
    max_gc: float = DEFAULT_MAX_GC,
    tail: str = "",
) -> list[PrimerCandidate]:
    """
    Forward primers starting at ``target_start``.

    Every length in ``[min_length, max_length]`` that fits the template is
    tried; Tm and GC are computed on the binding region only, the 5' tail
    (non-ACGT letters removed) only extends ``full_sequence``.

    Returns:
        Candidates sorted by distance from ``target_tm``
    """
    upper = seq.upper()
    tail = _clean_tail(tail)
    candidates = []
    for length in range(min_length, max_length + 1):
        end = target_start + length
        if target_start < 0 or end > len(upper):
            break
        candidate = _candidate(
            upper[target_start:end], tail, target_start, end, "forward",
            min_gc, max_gc, target_tm, tm_tolerance,
        )
        if candidate is not None:
            candidates.append(candidate)
    candidates.sort(key=lambda c: abs(c.tm - target_tm))
    return candidates


def design_reverse_primer(
    seq: str,
    target_end: int,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    target_tm: float = DEFAULT_TARGET_TM,
    tm_tolerance: float = DEFAULT_TM_TOLERANCE,
    min_gc: float = DEFAULT_MIN_GC,
    max_gc: float = DEFAULT_MAX_GC,
    tail: str = "",
) -> list[PrimerCandidate]:
    """
    Reverse primers whose template region ends at ``target_end``.

    The primer is the reverse complement of ``seq[start:target_end]``;
    ``start``/``end`` are template coordinates.
    """
    upper = seq.upper()
    tail = _clean_tail(tail)
    candidates = []
    for length in range(min_length, max_length + 1):
        start = target_end - length
        if start < 0 or target_end > len(upper):
            break
        binding = reverse_complement_dna(upper[start:target_end])
        candidate = _candidate(
            binding, tail, start, target_end, "reverse",
            min_gc, max_gc, target_tm, tm_tolerance,
        )
        if candidate is not None:
            candidates.append(candidate)
    candidates.sort(key=lambda c: abs(c.tm - target_tm))
    return candidates


def design_primer_pair(
    seq: str,
    target_start: int,
    target_end: int,
    min_length: int = DEFAULT_MIN_LENGTH,
    max_length: int = DEFAULT_MAX_LENGTH,
    target_tm: float = DEFAULT_TARGET_TM,
    tm_tolerance: float = DEFAULT_TM_TOLERANCE,
    min_gc: float = DEFAULT_MIN_GC,
    max_gc: float = DEFAULT_MAX_GC,
    forward_tail: str = "",
    reverse_tail: str = "",
    max_tm_diff: float = DEFAULT_MAX_TM_DIFF,
    max_pairs: int = DEFAULT_MAX_PAIRS,
) -> list[PrimerPair]:
    """
    Pair forward and reverse candidates around a target region.

    Pairs need a Tm difference of at most ``max_tm_diff`` and a positive
    product length (reverse end - forward start).

    Returns:
        Up to ``max_pairs`` pairs, by Tm difference then product length
    """
    window = dict(
        min_length=min_length,
        max_length=max_length,
        target_tm=target_tm,
        tm_tolerance=tm_tolerance,
        min_gc=min_gc,
        max_gc=max_gc,
    )
    forwards = design_forward_primer(seq, target_start, tail=forward_tail, **window)
    reverses = design_reverse_primer(seq, target_end, tail=reverse_tail, **window)

    pairs = []
    for fwd in forwards:
        for rev in reverses:
            tm_diff = abs(fwd.tm - rev.tm)
            if tm_diff > max_tm_diff:
                continue
            product_length = rev.end - fwd.start
            if product_length <= 0:
                continue
            pairs.append(PrimerPair(fwd, rev, product_length, tm_diff))

    pairs.sort(key=lambda p: (p.tm_difference, p.product_length))
    return pairs[:max_pairs]


def primer_to_feature(primer: PrimerCandidate, name: str, id_factory: IdFactory = uuid_id) -> Feature:
    """Annotate a primer's binding region as a ``primer_bind`` feature."""
    return Feature(
        id=id_factory(),
        name=name,
        type="primer_bind",
        start=primer.start,
        end=primer.end,
        strand=1 if primer.direction == "forward" else -1,
        color=PRIMER_COLOR,
        metadata={
            "tm": primer.tm,
            "gcPercent": primer.gc_percent,
            "primerSequence": primer.sequence,
            "fullSequence": primer.full_sequence,
            "tail": primer.tail,
        },
    )
