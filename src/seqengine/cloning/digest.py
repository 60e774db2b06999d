"""Restriction digestion into fragments, linear or circular."""

from collections.abc import Iterable

from seqengine.cloning.restriction import find_restriction_sites, get_enzymes
from seqengine.types import DigestFragment


def digest_preview(seq: str, enzyme_names: Iterable[str]) -> dict[str, int]:
    """Number of sites per requested enzyme (0 for non-cutters and unknown names)."""
    enzyme_names = list(enzyme_names)
    counts = {name: 0 for name in enzyme_names}
    for site in find_restriction_sites(seq, get_enzymes(enzyme_names)):
        counts[site.enzyme] = counts.get(site.enzyme, 0) + 1
    return counts


def _unique_cuts(seq: str, enzyme_names: Iterable[str], topology: str) -> list[tuple[int, str]]:
    """
    Sorted (cut position, enzyme) pairs; the first enzyme at a position wins.

    Type IIS enzymes can cut outside the molecule: on circular sequences
    those cuts wrap around the origin, on linear ones cuts at or beyond
    either end are dropped.
    """
    n = len(seq)
    cuts: dict[int, str] = {}
    for site in find_restriction_sites(seq, get_enzymes(enzyme_names)):
        position = site.cut_position
        if topology == "circular":
            position %= n
        elif not 0 < position < n:
            continue
        cuts.setdefault(position, site.enzyme)
    return sorted(cuts.items())


def restriction_digest(
    seq: str,
    enzyme_names: Iterable[str],
    topology: str = "linear",
) -> list[DigestFragment]:
    """
    Cut a sequence with the named enzymes.

    Linear molecules give N+1 fragments for N distinct cut positions, with
    no flanking enzyme at the free ends. Circular molecules give N
    fragments from each cut to the next; the one that crosses the origin
    joins the tail and head of the sequence and reports
    ``end_in_original`` past the sequence length.

    Args:
        seq: DNA sequence
        enzyme_names: Enzyme names; unknown names are ignored
        topology: "linear" or "circular"

    Returns:
        Fragments in cut order; the uncut sequence as one fragment when
        nothing cuts
    """
    cuts = _unique_cuts(seq, enzyme_names, topology)
    if not cuts:
        return [DigestFragment(seq, len(seq), 0, len(seq), None, None)]

    if topology == "circular":
        return _circular_fragments(seq, cuts)
    return _linear_fragments(seq, cuts)


def _linear_fragments(seq: str, cuts: list[tuple[int, str]]) -> list[DigestFragment]:
    bounds = [(0, None)] + cuts + [(len(seq), None)]
    fragments = []
    for (start, left), (end, right) in zip(bounds, bounds[1:]):
        if end > start:
            fragments.append(DigestFragment(seq[start:end], end - start, start, end, left, right))
    return fragments


def _circular_fragments(seq: str, cuts: list[tuple[int, str]]) -> list[DigestFragment]:
    n = len(seq)
    fragments = []
    for i, (start, left) in enumerate(cuts):
        end, right = cuts[(i + 1) % len(cuts)]
        if end > start:
            fragment = DigestFragment(seq[start:end], end - start, start, end, left, right)
        else:
            # Through the origin; a single cut linearises the whole plasmid
            fragment = DigestFragment(
                seq[start:] + seq[:end], n - start + end, start, end + n, left, right
            )
        if fragment.length > 0:
            fragments.append(fragment)
    return fragments
