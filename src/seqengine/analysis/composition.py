"""Nucleotide composition and simple thermodynamics."""

from Bio.SeqUtils import MeltingTemp

from seqengine.types import NucleotideComposition


# Average internal nucleotide masses (Da), no terminal groups
DNA_MW = {"A": 313.21, "T": 304.19, "G": 329.21, "C": 289.18, "N": 308.95}

# Average residue masses (Da)
AA_MW = {
    "G": 57.02, "A": 71.04, "V": 99.07, "L": 113.08, "I": 113.08,
    "P": 97.05, "F": 147.07, "W": 186.08, "M": 131.04, "S": 87.03,
    "T": 101.05, "C": 103.01, "Y": 163.06, "H": 137.06, "D": 115.03,
    "E": 129.04, "N": 114.04, "Q": 128.06, "K": 128.09, "R": 156.10,
}
AVG_AA_MW = 111.1
WATER_MW = 18.02

# Total base count at or below which the Wallace rule applies
WALLACE_MAX_BASES = 13


def nucleotide_composition(seq: str) -> NucleotideComposition:
    """Count A/T(U)/G/C/N/other, case-insensitively."""
    upper = seq.upper()
    a = upper.count("A")
    t = upper.count("T") + upper.count("U")
    g = upper.count("G")
    c = upper.count("C")
    n = upper.count("N")
    return NucleotideComposition(
        A=a, T=t, G=g, C=c, N=n, other=len(upper) - (a + t + g + c + n)
    )


def gc_content(seq: str) -> float:
    """GC fraction (0-1) over A+T+G+C only; 0 when there are none."""
    comp = nucleotide_composition(seq)
    total = comp.total_acgt
    if total == 0:
        return 0.0
    return (comp.G + comp.C) / total


def at_content(seq: str) -> float:
    """AT fraction (0-1); 0 when there are no A/T/G/C bases."""
    comp = nucleotide_composition(seq)
    total = comp.total_acgt
    if total == 0:
        return 0.0
    return (comp.A + comp.T) / total


def gc_content_window(seq: str, window_size: int = 100, step: int = 1) -> list[dict]:
    """
    GC fraction in a sliding window.

    Args:
        seq: DNA sequence
        window_size: Window size in bases
        step: Step between window starts

    Returns:
        List of {"position", "gc"} points; a sequence shorter than the
        window yields a single point at position 0.
    """
    upper = seq.upper()
    if len(upper) < window_size:
        return [{"position": 0, "gc": gc_content(upper)}]
    step = max(step, 1)
    return [
        {"position": i, "gc": gc_content(upper[i : i + window_size])}
        for i in range(0, len(upper) - window_size + 1, step)
    ]


def molecular_weight(seq: str) -> float:
    """
    Approximate molecular weight of single-stranded DNA (Da).

    Sums average nucleotide masses, removes one water per phosphodiester
    bond and adds the 3' hydroxyl and 5' phosphate.
    """
    upper = seq.upper().replace("U", "T")
    if not upper:
        return 0.0
    mw = sum(DNA_MW.get(ch, DNA_MW["N"]) for ch in upper)
    mw -= (len(upper) - 1) * WATER_MW
    mw += 17.01 + 79.0
    return round(mw, 2)


def protein_molecular_weight(seq: str) -> float:
    """Approximate protein mass (Da); stop symbols are ignored."""
    upper = seq.upper().replace("*", "")
    if not upper:
        return 0.0
    mw = WATER_MW + sum(AA_MW.get(ch, AVG_AA_MW) for ch in upper)
    return round(mw, 2)


def melting_temperature(seq: str) -> float | None:
    """
    Estimate oligo melting temperature (deg C).

    Wallace rule ``2(A+T) + 4(G+C)`` up to 13 counted bases, the
    salt-adjusted ``64.9 + 41(GC - 16.4)/N`` above. Only A/T/G/C count.

    Returns:
        Tm, or None when the sequence has no A/T/G/C bases
    """
    comp = nucleotide_composition(seq)
    total = comp.total_acgt
    if total == 0:
        return None
    if total <= WALLACE_MAX_BASES:
        return float(2 * (comp.A + comp.T) + 4 * (comp.G + comp.C))
    return 64.9 + 41 * (comp.G + comp.C - 16.4) / total


def nearest_neighbor_tm(seq: str) -> float | None:
    """Nearest-neighbour Tm with Primer3-like ionic conditions, None if undefined."""
    dna = "".join(ch for ch in seq.upper().replace("U", "T") if ch in "ACGT")
    if len(dna) < 2:
        return None
    return round(MeltingTemp.Tm_NN(dna, Na=50, Mg=1.5, dNTPs=0.6), 1)
