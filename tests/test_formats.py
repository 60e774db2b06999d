"""Tests for FASTA/GenBank parsing, format sniffing and cleaning."""

import datetime
import logging

import pytest

from seqengine.formats.detect import detect_file_format
from seqengine.formats.fasta import parse_fasta, to_fasta
from seqengine.formats.genbank import parse_genbank, parse_location, records_to_genbank, to_genbank
from seqengine.formats.validate import validate_and_clean_sequence
from seqengine.types import FastaRecord, Feature, GenBankRecord

GENBANK_TEXT = """\
LOCUS       pDemo                     24 bp    DNA     circular SYN 01-JAN-2024
DEFINITION  Demo plasmid with a
            wrapped definition.
ACCESSION   XY000001
FEATURES             Location/Qualifiers
     source          1..24
                     /organism="synthetic construct"
     CDS             complement(4..15)
                     /gene="demo"
                     /product="demo protein"
     misc_feature    join(1..3,20..24)
                     /note="split
                     feature"
     bogus_key       nowhere
ORIGIN
        1 atgaaaccct tagggtttca tgca
//
"""


class TestFasta:
    """Tests for FASTA reading and writing."""

    def test_parse_records(self):
        """Headers split into id and description; digits and spaces go."""
        records = parse_fasta(">seq1 first record\nATGC\nGGCC\n>seq2\nAA TT 12\n")
        assert records == [
            FastaRecord("seq1", "first record", "ATGCGGCC"),
            FastaRecord("seq2", "", "AATT"),
        ]

    def test_sequence_before_header(self):
        """Headerless leading sequence becomes a record with an empty id."""
        records = parse_fasta("ATGC\n>x\nGG\n")
        assert [r.header for r in records] == ["", "x"]
        assert records[0].sequence == "ATGC"

    def test_empty(self):
        """Blank text has no records."""
        assert parse_fasta("\n\n") == []

    def test_write_wraps_lines(self):
        """Sequence lines are wrapped at the given width."""
        text = to_fasta([FastaRecord("seq1", "first record", "ATGCGGCC")], line_width=4)
        assert text == ">seq1 first record\nATGC\nGGCC"

    def test_write_then_read(self):
        """Written FASTA parses back to the same records."""
        records = [FastaRecord("a", "", "ATGC" * 30), FastaRecord("b", "desc", "GG")]
        assert parse_fasta(to_fasta(records)) == records


class TestFormatDetection:
    """Tests for format sniffing."""

    @pytest.mark.parametrize(
        "content,expected",
        [
            ("  \n>seq\nATGC", "fasta"),
            ("LOCUS       x", "genbank"),
            ("ATGCATGC", "raw"),
            ("", "raw"),
        ],
    )
    def test_detect(self, content, expected):
        """Leading '>' is FASTA, leading LOCUS is GenBank."""
        assert detect_file_format(content) == expected


class TestValidate:
    """Tests for sequence cleaning."""

    def test_dna(self):
        """Foreign letters are dropped from DNA."""
        result = validate_and_clean_sequence("ATGC ATGC AJ 12")
        assert result.cleaned == "ATGCATGCA"
        assert result.invalid_count == 1
        assert result.invalid_chars == ["J"]

    def test_rna(self):
        """U without T selects the RNA alphabet."""
        result = validate_and_clean_sequence("AUGCAUGCAUX")
        assert result.cleaned == "AUGCAUGCAU"
        assert result.invalid_chars == ["X"]

    def test_protein(self):
        """Mostly amino acids selects the protein alphabet."""
        result = validate_and_clean_sequence("MKWLLE!QF")
        assert result.cleaned == "MKWLLEQF"
        assert result.invalid_chars == ["!"]

    def test_case_preserved(self):
        """Kept characters keep their case."""
        assert validate_and_clean_sequence("atgc").cleaned == "atgc"

    def test_unrecognised_text_left_alone(self):
        """Text fitting no alphabet is only stripped."""
        result = validate_and_clean_sequence("hello world ???")
        assert result.cleaned == "helloworld???"
        assert result.invalid_count == 0

    def test_empty(self):
        """Whitespace only cleans to nothing."""
        assert validate_and_clean_sequence(" \n 123 ").cleaned == ""


class TestParseLocation:
    """Tests for GenBank location strings."""

    @pytest.mark.parametrize(
        "location,expected",
        [
            ("1..10", (0, 10, 1)),
            ("<1..>100", (0, 100, 1)),
            ("5", (4, 5, 1)),
            ("complement(4..15)", (3, 15, -1)),
            ("join(1..10,20..30)", (0, 30, 1)),
            ("complement(join(5..10,20..30))", (4, 30, -1)),
        ],
    )
    def test_locations(self, location, expected):
        """Locations collapse to their outer 0-indexed span."""
        assert parse_location(location) == expected

    def test_no_positions(self):
        """Locations without numbers are rejected."""
        with pytest.raises(ValueError):
            parse_location("nowhere")


class TestGenBank:
    """Tests for GenBank reading and writing."""

    def test_header(self, id_factory):
        """LOCUS, DEFINITION and ACCESSION are read."""
        record = parse_genbank(GENBANK_TEXT, id_factory)[0]
        assert record.name == "pDemo"
        assert record.length == 24
        assert record.topology == "circular"
        assert record.molecule_type == "DNA"
        assert record.definition == "Demo plasmid with a wrapped definition."
        assert record.accession == "XY000001"
        assert record.sequence == "atgaaacccttagggtttcatgca"

    def test_features(self, id_factory, caplog):
        """Features are typed, named, and bad locations skipped."""
        with caplog.at_level(logging.WARNING):
            record = parse_genbank(GENBANK_TEXT, id_factory)[0]
        assert "bogus_key" in caplog.text

        source, cds, misc = record.features
        assert source.type == "custom"
        assert source.name == "source"
        assert source.metadata == {"organism": "synthetic construct"}

        assert cds.type == "cds"
        assert cds.name == "demo"
        assert (cds.start, cds.end, cds.strand) == (3, 15, -1)
        assert cds.id == "feat_2"

        assert misc.type == "misc_feature"
        assert misc.name == "split feature"
        assert (misc.start, misc.end) == (0, 24)

    def test_multiple_records(self):
        """Records split on '//' lines."""
        records = parse_genbank(GENBANK_TEXT + GENBANK_TEXT.replace("pDemo", "pOther"))
        assert [r.name for r in records] == ["pDemo", "pOther"]

    def test_length_falls_back_to_sequence(self):
        """A LOCUS line without a length uses the sequence length."""
        record = parse_genbank("LOCUS       x\nORIGIN\n        1 atgc\n//\n")[0]
        assert record.length == 4
        assert record.topology == "linear"

    def test_write(self):
        """Written records follow the flat-file layout."""
        record = GenBankRecord(
            name="pTest",
            length=12,
            topology="circular",
            molecule_type="DNA",
            features=[Feature(id="a", name="lacZ", type="cds", start=0, end=9)],
            sequence="ATGAAACCCGGG",
            definition="Test plasmid",
        )
        text = to_genbank(record, date=datetime.date(2024, 1, 1))
        lines = text.splitlines()
        assert lines[0].startswith("LOCUS       pTest")
        assert "12 bp" in lines[0]
        assert lines[0].endswith("circular UNK 01-JAN-2024")
        assert "DEFINITION  Test plasmid" in lines
        assert "     CDS             1..9" in lines
        assert '                     /label="lacZ"' in lines
        assert "        1 atgaaacccg gg" in lines
        assert lines[-1] == "//"
        assert not any(line.startswith("ACCESSION") for line in lines)

    def test_round_trip(self, id_factory):
        """Parsing written output restores coordinates, names and topology."""
        features = [
            Feature(id="a", name="lacZ", type="cds", start=0, end=9),
            Feature(id="b", name="ori", type="origin", start=9, end=12, strand=-1),
        ]
        record = GenBankRecord(
            name="pTest",
            length=12,
            topology="circular",
            molecule_type="DNA",
            features=features,
            sequence="ATGAAACCCGGG",
            accession="AB123",
        )
        parsed = parse_genbank(records_to_genbank([record]), id_factory)[0]
        assert parsed.name == "pTest"
        assert parsed.topology == "circular"
        assert parsed.accession == "AB123"
        assert parsed.sequence == "atgaaacccggg"
        assert [(f.name, f.type, f.start, f.end, f.strand) for f in parsed.features] == [
            ("lacZ", "cds", 0, 9, 1),
            ("ori", "origin", 9, 12, -1),
        ]

    def test_long_sequence_blocks(self):
        """ORIGIN lines hold 60 bases in blocks of 10."""
        record = GenBankRecord("x", 70, "linear", "DNA", [], "A" * 70)
        lines = to_genbank(record, date=datetime.date(2024, 1, 1)).splitlines()
        origin = lines.index("ORIGIN")
        assert lines[origin + 1] == "        1 " + " ".join(["a" * 10] * 6)
        assert lines[origin + 2] == "       61 " + "a" * 10

    def test_wrapped_feature_location(self):
        """Features through the origin are written as a join of both ends."""
        record = GenBankRecord(
            name="pWrap",
            length=100,
            topology="circular",
            molecule_type="DNA",
            features=[
                Feature(id="a", name="ori", type="origin", start=90, end=10),
                Feature(id="b", name="rev", type="misc_feature", start=95, end=5, strand=-1),
            ],
            sequence="A" * 100,
        )
        lines = to_genbank(record, date=datetime.date(2024, 1, 1)).splitlines()
        assert "     rep_origin      join(91..100,1..10)" in lines
        assert "     misc_feature    complement(join(96..100,1..5))" in lines
