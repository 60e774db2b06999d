"""Value objects shared across the engine.

All coordinates are 0-indexed and half-open. ``to_dict()`` renders each
object with the camelCase field names consumed by renderers and exporters.
"""

from dataclasses import dataclass, field, replace
from typing import Any


SEQUENCE_TYPES = ("dna", "rna", "protein", "misc", "unknown", "mixed")
TOPOLOGIES = ("linear", "circular")
OVERHANGS = ("blunt", "5prime", "3prime")

FEATURE_TYPES = (
    "orf",
    "gene",
    "cds",
    "promoter",
    "terminator",
    "rbs",
    "origin",
    "resistance",
    "restriction_site",
    "primer_bind",
    "misc_feature",
    "custom",
)


@dataclass
class Feature:
    """Annotated region on a sequence."""

    id: str
    name: str
    type: str
    start: int
    end: int
    strand: int = 1
    color: str = "#6b7280"
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def wraps(self) -> bool:
        """True when the feature runs through position 0 of a circular sequence."""
        return self.start > self.end

    def shifted(self, offset: int, new_id: str) -> "Feature":
        """Return a copy moved by ``offset`` with a fresh identifier."""
        return replace(
            self,
            id=new_id,
            start=self.start + offset,
            end=self.end + offset,
            metadata=dict(self.metadata),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "start": self.start,
            "end": self.end,
            "strand": self.strand,
            "color": self.color,
            "metadata": dict(self.metadata),
        }


@dataclass(frozen=True)
class RestrictionEnzyme:
    name: str
    recognition_sequence: str
    cut_offset: int
    complement_cut_offset: int
    overhang: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "recognitionSequence": self.recognition_sequence,
            "cutOffset": self.cut_offset,
            "complementCutOffset": self.complement_cut_offset,
            "overhang": self.overhang,
        }


@dataclass
class RestrictionSite:
    enzyme: str
    position: int
    cut_position: int
    recognition_sequence: str
    overhang: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "enzyme": self.enzyme,
            "position": self.position,
            "cutPosition": self.cut_position,
            "recognitionSequence": self.recognition_sequence,
            "overhang": self.overhang,
        }


@dataclass
class DigestFragment:
    """
    One product of a restriction digest.

    For circular digests a fragment that runs through the origin has
    ``end_in_original`` past the sequence length (``end + len(seq)``).
    """

    sequence: str
    length: int
    start_in_original: int
    end_in_original: int
    left_enzyme: str | None = None
    right_enzyme: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "length": self.length,
            "startInOriginal": self.start_in_original,
            "endInOriginal": self.end_in_original,
            "leftEnzyme": self.left_enzyme,
            "rightEnzyme": self.right_enzyme,
        }


@dataclass
class ORF:
    start: int
    end: int
    frame: int
    strand: int
    length: int
    amino_acids: int
    start_codon: str
    stop_codon: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start,
            "end": self.end,
            "frame": self.frame,
            "strand": self.strand,
            "length": self.length,
            "aminoAcids": self.amino_acids,
            "startCodon": self.start_codon,
            "stopCodon": self.stop_codon,
        }


@dataclass
class PrimerCandidate:
    """
    A primer binding region plus optional 5' tail.

    ``tm``/``gc_percent`` describe the binding region only. ``tm_nn`` is the
    nearest-neighbour estimate, reported for information.
    """

    sequence: str
    full_sequence: str
    tail: str
    start: int
    end: int
    length: int
    full_length: int
    tm: float
    gc_percent: float
    direction: str
    tm_nn: float | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "fullSequence": self.full_sequence,
            "tail": self.tail,
            "start": self.start,
            "end": self.end,
            "length": self.length,
            "fullLength": self.full_length,
            "tm": self.tm,
            "gcPercent": self.gc_percent,
            "direction": self.direction,
            "tmNN": self.tm_nn,
        }


@dataclass
class PrimerPair:
    forward: PrimerCandidate
    reverse: PrimerCandidate
    product_length: int
    tm_difference: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "forward": self.forward.to_dict(),
            "reverse": self.reverse.to_dict(),
            "productLength": self.product_length,
            "tmDifference": self.tm_difference,
        }


@dataclass
class DiffSegment:
    op: str
    seq1_start: int
    seq2_start: int
    seq1_text: str
    seq2_text: str
    length: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "op": self.op,
            "seq1Start": self.seq1_start,
            "seq2Start": self.seq2_start,
            "seq1Text": self.seq1_text,
            "seq2Text": self.seq2_text,
            "length": self.length,
        }


@dataclass
class DiffResult:
    segments: list[DiffSegment]
    identity: float
    mismatches: int
    insertions: int
    deletions: int
    aligned1: str
    aligned2: str

    def to_dict(self) -> dict[str, Any]:
        return {
            "segments": [s.to_dict() for s in self.segments],
            "identity": self.identity,
            "mismatches": self.mismatches,
            "insertions": self.insertions,
            "deletions": self.deletions,
            "aligned1": self.aligned1,
            "aligned2": self.aligned2,
        }


@dataclass
class MotifMatch:
    start: int
    end: int
    matched: str

    def to_dict(self) -> dict[str, Any]:
        return {"start": self.start, "end": self.end, "matched": self.matched}


@dataclass
class NucleotideComposition:
    A: int = 0
    T: int = 0
    G: int = 0
    C: int = 0
    N: int = 0
    other: int = 0

    @property
    def total_acgt(self) -> int:
        return self.A + self.T + self.G + self.C

    def to_dict(self) -> dict[str, int]:
        return {
            "A": self.A,
            "T": self.T,
            "G": self.G,
            "C": self.C,
            "N": self.N,
            "other": self.other,
        }


@dataclass
class SequenceAnalysis:
    length: int
    gc_content: float
    at_content: float
    molecular_weight: float
    melting_temp: float | None
    orfs: list[ORF]
    restriction_sites: list[RestrictionSite]
    composition: NucleotideComposition

    def to_dict(self) -> dict[str, Any]:
        return {
            "length": self.length,
            "gcContent": self.gc_content,
            "atContent": self.at_content,
            "molecularWeight": self.molecular_weight,
            "meltingTemp": self.melting_temp,
            "orfs": [o.to_dict() for o in self.orfs],
            "restrictionSites": [s.to_dict() for s in self.restriction_sites],
            "composition": self.composition.to_dict(),
        }


@dataclass(frozen=True)
class CodonTable:
    id: int
    name: str
    codons: dict[str, str]
    starts: tuple[str, ...]
    stops: tuple[str, ...]

    # frozen dataclasses hash their fields; the codon dict is not hashable
    def __hash__(self) -> int:
        return hash((self.id, self.name))


@dataclass(frozen=True)
class CodonUsage:
    organism: str
    frequencies: dict[str, dict[str, float]]

    def __hash__(self) -> int:
        return hash(self.organism)


@dataclass
class FastaRecord:
    header: str
    description: str
    sequence: str

    def to_dict(self) -> dict[str, str]:
        return {
            "header": self.header,
            "description": self.description,
            "sequence": self.sequence,
        }


@dataclass
class GenBankRecord:
    name: str
    length: int
    topology: str
    molecule_type: str
    features: list[Feature]
    sequence: str
    definition: str | None = None
    accession: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "length": self.length,
            "topology": self.topology,
            "moleculeType": self.molecule_type,
            "features": [f.to_dict() for f in self.features],
            "sequence": self.sequence,
            "definition": self.definition,
            "accession": self.accession,
        }


@dataclass
class LigationInput:
    sequence: str
    name: str = ""
    features: list[Feature] = field(default_factory=list)


@dataclass
class LigationResult:
    sequence: str
    features: list[Feature]

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "features": [f.to_dict() for f in self.features],
        }


@dataclass
class MutationScar:
    """Marker left on a sequence position by an edit."""

    id: str
    position: int
    type: str
    original: str | None = None
    inserted: str | None = None
    created_at: float = 0.0

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "position": self.position,
            "type": self.type,
            "original": self.original,
            "inserted": self.inserted,
            "createdAt": self.created_at,
        }


@dataclass
class MutationResult:
    raw: str
    scars: list[MutationScar]
    features: list[Feature]


@dataclass
class ValidationResult:
    cleaned: str
    invalid_count: int = 0
    invalid_chars: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "cleaned": self.cleaned,
            "invalidCount": self.invalid_count,
            "invalidChars": list(self.invalid_chars),
        }
