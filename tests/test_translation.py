"""Tests for translation, back-translation and codon optimisation."""

import pytest

from seqengine.analysis.codon_optimize import calculate_cai, codon_optimize
from seqengine.analysis.codon_tables import (
    ECOLI_USAGE,
    HUMAN_USAGE,
    STANDARD_CODE,
    USAGE_CACHE_SIZE,
    best_codon,
    get_amino_acid_to_codons,
    get_codon_usage,
    max_frequencies,
    ranked_codons,
)
from seqengine.analysis.translation import (
    reverse_translate,
    reverse_translate_all,
    translate,
    translate_all_frames,
    translate_from_first_atg,
)
from seqengine.types import CodonUsage


class TestCodonTables:
    """Tests for codon tables and usage lookups."""

    def test_standard_code_complete(self):
        """All 64 codons are present."""
        assert len(STANDARD_CODE.codons) == 64
        assert sorted(get_amino_acid_to_codons()["*"]) == ["TAA", "TAG", "TGA"]

    def test_alternative_starts(self):
        """CTG and TTG are accepted as starts."""
        assert set(STANDARD_CODE.starts) == {"ATG", "CTG", "TTG"}

    def test_unknown_organism(self):
        """Unknown organisms raise ValueError."""
        with pytest.raises(ValueError):
            get_codon_usage("martian")

    def test_organism_lookup_case_insensitive(self):
        """Organism keys are matched case-insensitively."""
        assert get_codon_usage("Human") is HUMAN_USAGE

    def test_ranked_codons_memoized(self):
        """Ranking is computed once per usage table."""
        assert ranked_codons(ECOLI_USAGE) is ranked_codons(ECOLI_USAGE)
        assert ranked_codons(ECOLI_USAGE)["K"] == ("AAA", "AAG")

    def test_cached_rankings_read_only(self):
        """Cached rankings cannot be modified by callers."""
        with pytest.raises(TypeError):
            ranked_codons(ECOLI_USAGE)["K"] = ("AAG",)
        with pytest.raises(TypeError):
            max_frequencies(ECOLI_USAGE)["K"] = 0.0
        assert best_codon("K", ECOLI_USAGE) == "AAA"

    def test_cache_is_bounded(self):
        """Rankings are cached for a limited number of usage tables."""
        for i in range(USAGE_CACHE_SIZE + 5):
            ranked_codons(CodonUsage(f"custom{i}", {"K": {"AAA": 0.5, "AAG": 0.5}}))
        assert ranked_codons.cache_info().currsize <= USAGE_CACHE_SIZE

    def test_best_codon_unknown_residue(self):
        """Residues without codons map to NNN."""
        assert best_codon("B", ECOLI_USAGE) == "NNN"


class TestTranslate:
    """Tests for forward translation."""

    def test_translate_simple(self):
        """Stops are rendered as '*'."""
        assert translate("ATGGCCTAA") == "MA*"

    def test_translate_rna(self):
        """U is read as T."""
        assert translate("AUGGCC") == "MA"

    def test_translate_unknown_codon(self):
        """Codons outside the table become X."""
        assert translate("ATGNNN") == "MX"

    def test_translate_frame(self):
        """Frame offsets skip leading bases; partial codons are dropped."""
        assert translate("CATGGCCA", frame=1) == "MA"

    def test_stop_at_first(self):
        """Translation halts after the first stop."""
        assert translate("ATGTAAGCC", stop_at_first=True) == "M*"
        assert translate("ATGTAAGCC") == "M*A"

    def test_all_frames(self):
        """Three forward frames are returned."""
        assert translate_all_frames("ATGGCC") == ("MA", "W", "G")

    def test_from_first_atg(self):
        """Translation starts at the first ATG."""
        assert translate_from_first_atg("CCATGAAATAGGG") == "MK*"
        assert translate_from_first_atg("CCCGGG") is None


class TestReverseTranslate:
    """Tests for back-translation."""

    def test_most_frequent_codons(self):
        """Each residue maps to its top codon; '*' ends the protein."""
        assert reverse_translate("MK*A") == "ATGAAA"

    def test_human_usage(self):
        """Usage table changes the codon choice."""
        assert reverse_translate("K", HUMAN_USAGE) == "AAG"

    def test_all_choices(self):
        """Ranked alternatives are listed per residue."""
        assert reverse_translate_all("MKB") == [["ATG"], ["AAA", "AAG"], ["NNN"]]


class TestCodonOptimize:
    """Tests for codon optimisation and CAI."""

    def test_optimize(self):
        """Synonymous codons are replaced; stops are kept."""
        assert codon_optimize("ATGAAGTAA", "ecoli") == "ATGAAATAA"

    def test_optimize_preserves_flanks(self):
        """Bases before the frame and a trailing partial codon survive."""
        assert codon_optimize("CATGAAGTAAG", "ecoli", frame=1) == "CATGAAATAAG"

    def test_optimize_preserves_protein(self):
        """Optimisation never changes the encoded protein."""
        seq = "ATGCTTAGCGGTACCTTGAAGTGA"
        assert translate(codon_optimize(seq, "yeast")) == translate(seq)

    def test_cai_of_optimized_is_one(self):
        """A fully optimised sequence has CAI 1."""
        assert calculate_cai(codon_optimize("ATGAAGCTT", "ecoli"), "ecoli") == pytest.approx(1.0)

    def test_cai_rare_codon(self):
        """CAI is the geometric mean of relative adaptiveness."""
        assert calculate_cai("AAG", "ecoli") == pytest.approx(0.26 / 0.74)

    def test_cai_empty(self):
        """No scoreable codons gives 0."""
        assert calculate_cai("", "ecoli") == 0.0
        assert calculate_cai("TAATGA", "ecoli") == 0.0

    def test_unknown_organism(self):
        """Unknown organisms raise ValueError."""
        with pytest.raises(ValueError):
            codon_optimize("ATG", "martian")
