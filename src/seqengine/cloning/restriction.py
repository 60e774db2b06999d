"""Restriction enzyme database and recognition-site search."""

import logging
from collections import Counter
from collections.abc import Iterable

from seqengine.types import RestrictionEnzyme, RestrictionSite
from seqengine.utils.iupac import IUPAC_DNA_CLASSES, compile_iupac, scan_overlapping

logger = logging.getLogger(__name__)


def _enzyme(name, site, cut, complement_cut, overhang):
    return RestrictionEnzyme(
        name=name,
        recognition_sequence=site,
        cut_offset=cut,
        complement_cut_offset=complement_cut,
        overhang=overhang,
    )


RESTRICTION_ENZYMES: tuple[RestrictionEnzyme, ...] = (
    _enzyme("EcoRI", "GAATTC", 1, 5, "5prime"),
    _enzyme("BamHI", "GGATCC", 1, 5, "5prime"),
    _enzyme("HindIII", "AAGCTT", 1, 5, "5prime"),
    _enzyme("XbaI", "TCTAGA", 1, 5, "5prime"),
    _enzyme("SalI", "GTCGAC", 1, 5, "5prime"),
    _enzyme("PstI", "CTGCAG", 5, 1, "3prime"),
    _enzyme("NotI", "GCGGCCGC", 2, 6, "5prime"),
    _enzyme("XhoI", "CTCGAG", 1, 5, "5prime"),
    _enzyme("NcoI", "CCATGG", 1, 5, "5prime"),
    _enzyme("NdeI", "CATATG", 2, 4, "5prime"),
    _enzyme("SpeI", "ACTAGT", 1, 5, "5prime"),
    _enzyme("KpnI", "GGTACC", 5, 1, "3prime"),
    _enzyme("SacI", "GAGCTC", 5, 1, "3prime"),
    _enzyme("SmaI", "CCCGGG", 3, 3, "blunt"),
    _enzyme("BglII", "AGATCT", 1, 5, "5prime"),
    _enzyme("ClaI", "ATCGAT", 2, 4, "5prime"),
    _enzyme("EcoRV", "GATATC", 3, 3, "blunt"),
    _enzyme("AgeI", "ACCGGT", 1, 5, "5prime"),
    _enzyme("NheI", "GCTAGC", 1, 5, "5prime"),
    _enzyme("MluI", "ACGCGT", 1, 5, "5prime"),
    _enzyme("BsaI", "GGTCTC", 7, 11, "5prime"),
    _enzyme("BbsI", "GAAGAC", 8, 12, "5prime"),
    _enzyme("ScaI", "AGTACT", 3, 3, "blunt"),
    _enzyme("ApaI", "GGGCCC", 5, 1, "3prime"),
    _enzyme("SphI", "GCATGC", 5, 1, "3prime"),
)

ENZYMES_BY_NAME = {e.name: e for e in RESTRICTION_ENZYMES}

# 4 protective GC bases + recognition site, for primer 5' tails
ENZYME_TAIL_PRESETS = (
    {"name": "EcoRI", "tail": "GCGCGAATTC"},
    {"name": "BamHI", "tail": "GCGCGGATCC"},
    {"name": "HindIII", "tail": "GCGCAAGCTT"},
    {"name": "NcoI", "tail": "GCGCCCATGG"},
    {"name": "XhoI", "tail": "GCGCCTCGAG"},
    {"name": "NdeI", "tail": "GCGCCATATG"},
)


def get_enzymes(names: Iterable[str]) -> list[RestrictionEnzyme]:
    """
    Look up enzymes by name in database order.

    Unknown names are skipped with a warning rather than failing the call.
    """
    wanted = set(names)
    unknown = sorted(wanted - ENZYMES_BY_NAME.keys())
    if unknown:
        logger.warning("Ignoring unknown restriction enzymes: %s", ", ".join(unknown))
    return [e for e in RESTRICTION_ENZYMES if e.name in wanted]


def find_restriction_sites(
    seq: str,
    enzymes: Iterable[RestrictionEnzyme] = RESTRICTION_ENZYMES,
) -> list[RestrictionSite]:
    """
    Find every recognition site, overlapping ones included.

    Args:
        seq: DNA sequence (any case)
        enzymes: Enzymes to scan for

    Returns:
        Sites sorted by position; ``cut_position`` is the match start
        plus the enzyme's top-strand cut offset
    """
    upper = seq.upper()
    sites = []
    for enzyme in enzymes:
        regex = compile_iupac(enzyme.recognition_sequence, IUPAC_DNA_CLASSES, flags=0)
        if regex is None:
            continue
        for match in scan_overlapping(regex, upper):
            sites.append(
                RestrictionSite(
                    enzyme=enzyme.name,
                    position=match.start(),
                    cut_position=match.start() + enzyme.cut_offset,
                    recognition_sequence=enzyme.recognition_sequence,
                    overhang=enzyme.overhang,
                )
            )
    sites.sort(key=lambda site: site.position)
    return sites


def find_unique_cutters(
    seq: str,
    enzymes: Iterable[RestrictionEnzyme] = RESTRICTION_ENZYMES,
) -> list[RestrictionSite]:
    """Sites of enzymes that cut exactly once, by position."""
    sites = find_restriction_sites(seq, enzymes)
    hits = Counter(site.enzyme for site in sites)
    return [site for site in sites if hits[site.enzyme] == 1]


def find_non_cutters(
    seq: str,
    enzymes: Iterable[RestrictionEnzyme] = RESTRICTION_ENZYMES,
) -> list[RestrictionEnzyme]:
    """Enzymes with no recognition site in ``seq``."""
    enzymes = list(enzymes)
    cutting = {site.enzyme for site in find_restriction_sites(seq, enzymes)}
    return [e for e in enzymes if e.name not in cutting]
