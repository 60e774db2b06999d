"""Tests for sequence comparison and motif search."""

import logging

from seqengine.analysis.alignment import MAX_NW_CELLS, needleman_wunsch, sequence_diff
from seqengine.analysis.motifs import find_motif


class TestSequenceDiff:
    """Tests for global alignment diffs."""

    def test_identical(self):
        """Identical sequences align without gaps."""
        result = sequence_diff("ATGCATGC", "ATGCATGC")
        assert result.identity == 100
        assert result.mismatches == result.insertions == result.deletions == 0
        assert result.aligned1 == result.aligned2 == "ATGCATGC"
        assert [s.op for s in result.segments] == ["match"]

    def test_single_mismatch(self):
        """One substitution is one mismatch."""
        result = sequence_diff("ATGCATGC", "ATGCTTGC")
        assert result.mismatches == 1
        assert 80 < result.identity < 100
        assert [s.op for s in result.segments] == ["match", "mismatch", "match"]
        mismatch = result.segments[1]
        assert (mismatch.seq1_start, mismatch.seq2_start) == (4, 4)
        assert (mismatch.seq1_text, mismatch.seq2_text) == ("A", "T")

    def test_insertion(self):
        """Extra bases in the second sequence are insertions."""
        result = sequence_diff("ATGCATGC", "ATGCAAATGC")
        assert result.insertions == 2
        assert result.deletions == 0
        assert len(result.aligned1) == len(result.aligned2)
        assert result.aligned1.replace("-", "") == "ATGCATGC"

    def test_deletion(self):
        """Bases missing from the second sequence are deletions."""
        result = sequence_diff("ATGCAAATGC", "ATGCATGC")
        assert result.deletions == 2
        assert result.aligned2.replace("-", "") == "ATGCATGC"

    def test_case_insensitive(self):
        """Comparison ignores case."""
        assert sequence_diff("atgc", "ATGC").identity == 100

    def test_empty(self):
        """Two empty sequences have zero identity."""
        result = sequence_diff("", "")
        assert result.identity == 0
        assert result.aligned1 == result.aligned2 == ""
        assert result.segments == []

    def test_one_empty(self):
        """Against an empty sequence everything is a deletion."""
        result = sequence_diff("ATG", "")
        assert result.deletions == 3
        assert result.aligned2 == "---"

    def test_traceback_prefers_diagonal(self):
        """On ties the diagonal move wins, so gaps land at the start."""
        assert needleman_wunsch("AA", "A") == ("AA", "-A")

    def test_positional_fallback(self, caplog):
        """Very large inputs fall back to position-by-position comparison."""
        long1 = "A" * 6000
        long2 = "A" * 5000 + "T" * 1000
        assert len(long1) * len(long2) > MAX_NW_CELLS
        with caplog.at_level(logging.INFO):
            result = sequence_diff(long1, long2)
        assert len(result.aligned1) == len(result.aligned2)
        assert result.mismatches == 1000
        assert "positional" in caplog.text

    def test_positional_fallback_pads(self):
        """The shorter sequence is padded with trailing gaps."""
        long1 = "A" * 6000
        long2 = "A" * 5000
        result = sequence_diff(long1, long2)
        assert result.aligned2.endswith("-" * 1000)
        assert result.deletions == 1000

    def test_to_dict_keys(self):
        """Boundary output uses camelCase keys."""
        data = sequence_diff("ATGC", "ATTC").to_dict()
        assert set(data) == {"segments", "identity", "mismatches", "insertions", "deletions", "aligned1", "aligned2"}
        assert "seq1Start" in data["segments"][0]


class TestFindMotif:
    """Tests for IUPAC motif search."""

    def test_exact(self):
        """Non-overlapping exact hits."""
        assert [m.start for m in find_motif("ATGATGATG", "ATG")] == [0, 3, 6]

    def test_overlapping(self):
        """Overlaps are all reported."""
        matches = find_motif("AAAA", "AA")
        assert [m.start for m in matches] == [0, 1, 2]
        assert all(m.end - m.start == 2 for m in matches)

    def test_iupac(self):
        """R expands to A or G."""
        matches = find_motif("ATGCATGC", "RTG")
        assert [m.start for m in matches] == [0, 4]
        assert matches[0].matched == "ATG"

    def test_no_match(self):
        """Absent motifs give nothing."""
        assert find_motif("AAAA", "CCCC") == []

    def test_empty_inputs(self):
        """Empty pattern or sequence gives nothing."""
        assert find_motif("ATGC", "") == []
        assert find_motif("", "ATG") == []

    def test_case_insensitive(self):
        """Lowercase sequences match uppercase patterns."""
        assert len(find_motif("atgatg", "ATG")) == 2

    def test_rna_motif(self):
        """U matches literally and N covers it."""
        assert [m.start for m in find_motif("AUGAUG", "NUG")] == [0, 3]

    def test_protein_literal(self):
        """Protein letters outside IUPAC match literally."""
        assert [m.start for m in find_motif("MKLLEFLLQ", "LL")] == [2, 6]
