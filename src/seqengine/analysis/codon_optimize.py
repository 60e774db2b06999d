"""Codon optimisation and Codon Adaptation Index."""

import math

from seqengine.analysis.codon_tables import (
    STANDARD_CODE,
    best_codon,
    get_codon_usage,
    max_frequencies,
)
from seqengine.utils.sequences import normalize_dna


def codon_optimize(seq: str, organism: str = "ecoli", frame: int = 0) -> str:
    """
    Re-encode each in-frame codon with the organism's preferred synonym.

    Stop codons and codons outside the genetic code are kept verbatim, as
    are leading bases before ``frame`` and a trailing partial codon.

    Raises:
        ValueError: If the organism is unknown
    """
    usage = get_codon_usage(organism)
    dna = normalize_dna(seq)

    parts = [dna[:frame]]
    for i in range(frame, len(dna) - 2, 3):
        codon = dna[i : i + 3]
        aa = STANDARD_CODE.codons.get(codon)
        if aa is None or aa == "*":
            parts.append(codon)
        else:
            parts.append(best_codon(aa, usage))

    remainder = (len(dna) - frame) % 3 if len(dna) > frame else 0
    if remainder:
        parts.append(dna[len(dna) - remainder :])
    return "".join(parts)


def calculate_cai(seq: str, organism: str = "ecoli", frame: int = 0) -> float:
    """
    Codon Adaptation Index of a coding sequence.

    Geometric mean of ``freq(codon) / max freq(residue)`` over scoreable
    in-frame codons. Stops, unknown codons and zero-frequency codons are
    skipped.

    Returns:
        CAI in [0, 1]; 0 when no codon could be scored
    """
    usage = get_codon_usage(organism)
    reference = max_frequencies(usage)
    dna = normalize_dna(seq)

    log_sum = 0.0
    count = 0
    for i in range(frame, len(dna) - 2, 3):
        codon = dna[i : i + 3]
        aa = STANDARD_CODE.codons.get(codon)
        if aa is None or aa == "*":
            continue
        freqs = usage.frequencies.get(aa)
        if not freqs:
            continue
        max_freq = reference[aa]
        freq = freqs.get(codon, 0.0)
        if max_freq > 0 and freq > 0:
            log_sum += math.log(freq / max_freq)
            count += 1

    if count == 0:
        return 0.0
    return math.exp(log_sum / count)
