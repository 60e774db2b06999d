"""Tests for six-frame ORF detection."""

from seqengine.analysis.orfs import find_longest_orf, find_orfs
from seqengine.utils.sequences import reverse_complement_dna


class TestFindOrfs:
    """Tests for ORF search on both strands."""

    def test_forward_orf(self, orf_sequence):
        """A single forward ORF is reported with its stop codon."""
        orfs = find_orfs(orf_sequence, 30)
        assert len(orfs) == 1
        orf = orfs[0]
        assert (orf.start, orf.end) == (0, 93)
        assert orf.strand == 1
        assert orf.frame == 1
        assert orf.amino_acids == 30
        assert orf.length == 93
        assert orf.start_codon == "ATG"
        assert orf.stop_codon == "TAA"

    def test_minimum_length_filter(self, orf_sequence):
        """ORFs shorter than the minimum are dropped."""
        assert find_orfs(orf_sequence, 31) == []

    def test_reverse_strand_coordinates(self, orf_sequence):
        """Reverse-strand ORFs are mapped to forward coordinates."""
        seq = "GG" + reverse_complement_dna(orf_sequence)
        orfs = find_orfs(seq, 30)
        assert len(orfs) == 1
        assert orfs[0].strand == -1
        assert (orfs[0].start, orfs[0].end) == (2, 95)

    def test_orf_without_stop(self):
        """An ORF running off the end has no stop codon."""
        orfs = find_orfs("ATG" + "AAA" * 5, 1)
        assert orfs[0].stop_codon == ""
        assert orfs[0].amino_acids == 6
        assert orfs[0].end == 18

    def test_rna_input(self, orf_sequence):
        """RNA is read as DNA."""
        assert len(find_orfs(orf_sequence.replace("T", "U"), 30)) == 1

    def test_sorted_longest_first(self):
        """Results are ordered by nucleotide length."""
        seq = "ATGAAATAA" + "CC" + "ATG" + "AAA" * 4 + "TAA"
        orfs = find_orfs(seq, 1)
        lengths = [orf.length for orf in orfs]
        assert lengths == sorted(lengths, reverse=True)

    def test_longest_orf(self, orf_sequence):
        """The longest ORF is returned, or None."""
        assert find_longest_orf(orf_sequence).amino_acids == 30
        assert find_longest_orf("CCCCCC") is None
