"""Combined composition, ORF and restriction-site analysis."""

from seqengine.analysis.composition import (
    at_content,
    gc_content,
    melting_temperature,
    molecular_weight,
    nucleotide_composition,
)
from seqengine.analysis.orfs import find_orfs
from seqengine.cloning.restriction import RESTRICTION_ENZYMES, find_restriction_sites
from seqengine.types import Feature, SequenceAnalysis
from seqengine.utils.ids import FeatureIdGenerator, IdFactory
from seqengine.utils.sequences import normalize_dna

ORF_COLORS = {1: "#4ade80", 2: "#60a5fa", 3: "#f59e0b"}
DEFAULT_ORF_COLOR = "#9ca3af"
RESTRICTION_COLOR = "#ef4444"


def auto_annotate(seq: str, min_orf_amino_acids: int = 30) -> SequenceAnalysis:
    """Run composition, ORF and restriction-site analysis on one sequence."""
    dna = normalize_dna(seq)
    return SequenceAnalysis(
        length=len(dna),
        gc_content=gc_content(dna),
        at_content=at_content(dna),
        molecular_weight=molecular_weight(dna),
        melting_temp=melting_temperature(dna),
        orfs=find_orfs(dna, min_orf_amino_acids),
        restriction_sites=find_restriction_sites(dna, RESTRICTION_ENZYMES),
        composition=nucleotide_composition(dna),
    )


def annotate_to_features(
    seq: str,
    min_orf_amino_acids: int = 30,
    id_factory: IdFactory | None = None,
) -> list[Feature]:
    """
    Turn auto-annotation results into map features.

    ORFs come first (longest first), then restriction sites by position.

    Args:
        seq: DNA sequence
        min_orf_amino_acids: Minimum ORF length in residues
        id_factory: Callable minting feature ids; a fresh ``feat_<n>``
            counter scoped to this call is used when omitted

    Returns:
        List of ``orf`` and ``restriction_site`` features
    """
    next_id = id_factory or FeatureIdGenerator()
    analysis = auto_annotate(seq, min_orf_amino_acids)
    features = []

    for orf in analysis.orfs:
        features.append(
            Feature(
                id=next_id(),
                name=f"ORF ({orf.amino_acids} aa)",
                type="orf",
                start=orf.start,
                end=orf.end,
                strand=orf.strand,
                color=ORF_COLORS.get(orf.frame, DEFAULT_ORF_COLOR),
                metadata={
                    "frame": orf.frame,
                    "aminoAcids": orf.amino_acids,
                    "startCodon": orf.start_codon,
                    "stopCodon": orf.stop_codon,
                },
            )
        )

    for site in analysis.restriction_sites:
        features.append(
            Feature(
                id=next_id(),
                name=site.enzyme,
                type="restriction_site",
                start=site.position,
                end=site.position + len(site.recognition_sequence),
                strand=1,
                color=RESTRICTION_COLOR,
                metadata={
                    "cutPosition": site.cut_position,
                    "overhang": site.overhang,
                    "recognitionSequence": site.recognition_sequence,
                },
            )
        )

    return features
