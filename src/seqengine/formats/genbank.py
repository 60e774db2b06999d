"""GenBank flat-file reading and writing.

Locations are 1-indexed and inclusive in the file and 0-indexed,
half-open on ``Feature`` objects.
"""

import datetime
import logging
import re
import textwrap
from collections.abc import Iterable

from seqengine.types import Feature, GenBankRecord
from seqengine.utils.ids import IdFactory, uuid_id

logger = logging.getLogger(__name__)

# GenBank feature key (lowercased) -> feature type
FEATURE_TYPE_MAP = {
    "gene": "gene",
    "cds": "cds",
    "promoter": "promoter",
    "terminator": "terminator",
    "misc_feature": "misc_feature",
    "rep_origin": "origin",
    "origin": "origin",
    "primer_bind": "primer_bind",
    "rbs": "rbs",
    "orf": "orf",
    "resistance": "resistance",
    "restriction_site": "restriction_site",
}

# Feature type -> key written back out
GENBANK_KEYS = {"cds": "CDS", "origin": "rep_origin"}

FEATURE_COLORS = {
    "gene": "#60a5fa",
    "cds": "#4ade80",
    "promoter": "#fbbf24",
    "terminator": "#fb7185",
    "misc_feature": "#a78bfa",
    "origin": "#22d3ee",
    "primer_bind": "#f97316",
    "orf": "#4ade80",
    "rbs": "#a78bfa",
    "resistance": "#fb7185",
    "restriction_site": "#6b7280",
    "custom": "#6b7280",
}

NAME_QUALIFIERS = ("gene", "product", "label", "note")

_FEATURE_START = re.compile(r"^ {5}(\S+)\s+(.*)$")
_MOLECULE = re.compile(r"\b(DNA|RNA|mRNA|ds-DNA|ss-DNA|ds-RNA|ss-RNA)\b", re.IGNORECASE)
_NUMBER = re.compile(r"\d+")
_SEQUENCE_NOISE = re.compile(r"[\s\d/]")


def parse_location(location: str) -> tuple[int, int, int]:
    """
    Convert a GenBank location into (start, end, strand).

    Handles ``a..b``, single positions, ``complement(...)`` and
    ``join(...)``/``order(...)``, which collapse to their outer span.
    Partial markers ``<``/``>`` are ignored.

    Raises:
        ValueError: If the location holds no positions
    """
    location = location.strip()
    strand = -1 if location.startswith("complement(") else 1
    positions = [int(p) for p in _NUMBER.findall(location)]
    if not positions:
        raise ValueError(f"No positions in location {location!r}")
    return min(positions) - 1, max(positions), strand


def _split_feature_blocks(lines: list[str]) -> list[list[str]]:
    blocks: list[list[str]] = []
    for line in lines:
        if _FEATURE_START.match(line):
            blocks.append([line])
        elif blocks:
            blocks[-1].append(line)
    return blocks


def _unquote(value: str) -> str:
    if value.startswith('"'):
        value = value[1:]
    if value.endswith('"'):
        value = value[:-1]
    return value


def _parse_qualifiers(lines: list[str]) -> dict[str, str]:
    qualifiers: dict[str, str] = {}
    key = None
    value = ""
    for raw in lines:
        line = raw.strip()
        if not line:
            continue
        if line.startswith("/"):
            if key is not None:
                qualifiers[key] = _unquote(value)
            key, _, value = line[1:].partition("=")
        elif key is not None:
            value += " " + line
    if key is not None:
        qualifiers[key] = _unquote(value)
    return qualifiers


def _parse_feature(block: list[str], id_factory: IdFactory) -> Feature | None:
    match = _FEATURE_START.match(block[0])
    key = match.group(1)
    location = match.group(2).strip()

    # Location continuation lines come before the first qualifier
    idx = 1
    while idx < len(block):
        line = block[idx].strip()
        if not line or line.startswith("/"):
            break
        location += line
        idx += 1

    qualifiers = _parse_qualifiers(block[idx:])
    try:
        start, end, strand = parse_location(location)
    except ValueError:
        logger.warning("Skipping %s feature with unparseable location %r", key, location)
        return None

    feature_type = FEATURE_TYPE_MAP.get(key.lower(), "custom")
    name = next((qualifiers[q] for q in NAME_QUALIFIERS if qualifiers.get(q)), key.lower())
    return Feature(
        id=id_factory(),
        name=name,
        type=feature_type,
        start=start,
        end=end,
        strand=strand,
        color=FEATURE_COLORS[feature_type],
        metadata=qualifiers,
    )


def parse_features(lines: list[str], id_factory: IdFactory = uuid_id) -> list[Feature]:
    """Parse the lines of a FEATURES table into features."""
    features = []
    for block in _split_feature_blocks(lines):
        feature = _parse_feature(block, id_factory)
        if feature is not None:
            features.append(feature)
    return features


def _parse_locus(line: str) -> tuple[str, int, str, str]:
    parts = line.split()
    name = parts[1] if len(parts) >= 2 else "Unknown"
    length = 0
    for i in range(2, len(parts) - 1):
        if parts[i].isdigit() and parts[i + 1].lower() in ("bp", "aa"):
            length = int(parts[i])
            break
    topology = "circular" if re.search(r"\bcircular\b", line, re.IGNORECASE) else "linear"
    molecule = _MOLECULE.search(line)
    return name, length, topology, molecule.group(1) if molecule else ""


def _parse_record(text: str, id_factory: IdFactory) -> GenBankRecord:
    name, length, topology, molecule_type = "Unknown", 0, "linear", ""
    definition_lines: list[str] = []
    accession = ""
    feature_lines: list[str] = []
    sequence: list[str] = []
    section = "header"

    for line in text.split("\n"):
        if section == "definition":
            if line.startswith(" " * 12):
                definition_lines.append(line.strip())
                continue
            section = "header"

        if line.startswith("LOCUS"):
            name, length, topology, molecule_type = _parse_locus(line)
            section = "header"
        elif line.startswith("DEFINITION"):
            definition_lines = [line[len("DEFINITION"):].strip()]
            section = "definition"
        elif line.startswith("ACCESSION"):
            accession = line[len("ACCESSION"):].strip()
        elif line.startswith("FEATURES"):
            section = "features"
        elif line.startswith("ORIGIN"):
            section = "origin"
        elif section == "features":
            if line and not line[0].isspace():
                # Next top-level keyword, e.g. BASE COUNT
                section = "header"
            else:
                feature_lines.append(line)
        elif section == "origin":
            sequence.append(_SEQUENCE_NOISE.sub("", line))

    seq = "".join(sequence).lower()
    definition = " ".join(definition_lines).strip()
    return GenBankRecord(
        name=name,
        length=length or len(seq),
        topology=topology,
        molecule_type=molecule_type,
        features=parse_features(feature_lines, id_factory),
        sequence=seq,
        definition=definition or None,
        accession=accession or None,
    )


def parse_genbank(text: str, id_factory: IdFactory = uuid_id) -> list[GenBankRecord]:
    """
    Parse one or more GenBank records separated by ``//`` lines.

    Args:
        text: Flat-file contents
        id_factory: Callable minting ids for parsed features

    Returns:
        Records with lowercase sequences and 0-indexed features
    """
    text = text.replace("\r\n", "\n")
    return [
        _parse_record(chunk, id_factory)
        for chunk in re.split(r"\n//", text)
        if chunk.strip()
    ]


def _format_location(feature: Feature, length: int) -> str:
    if feature.wraps:
        # Through the origin of a circular molecule
        span = f"join({feature.start + 1}..{length},1..{feature.end})"
    else:
        span = f"{feature.start + 1}..{feature.end}"
    return f"complement({span})" if feature.strand == -1 else span


def _format_qualifier(key: str, value) -> str:
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        value = str(value)
    if isinstance(value, str):
        return f'{" " * 21}/{key}="{value}"' if value else f'{" " * 21}/{key}'
    return f'{" " * 21}/{key}={value}'


def to_genbank(record: GenBankRecord, date: datetime.date | None = None) -> str:
    """
    Render a record as a GenBank flat file.

    Features carry their metadata as qualifiers plus a ``/label`` with the
    feature name when the metadata has none.
    """
    date = date or datetime.date.today()
    locus_name = re.sub(r"\s+", "_", record.name[:16]) or "Unknown"
    unit = "aa" if record.molecule_type.lower() == "aa" else "bp"
    molecule = record.molecule_type or "DNA"
    lines = [
        f"LOCUS       {locus_name:<16} {len(record.sequence):>7} {unit}    "
        f"{molecule:<6}  {record.topology} UNK {date.strftime('%d-%b-%Y').upper()}"
    ]

    definition = textwrap.wrap(record.definition or f"{record.name}.", width=67) or ["."]
    lines.append(f"DEFINITION  {definition[0]}")
    lines.extend(f"{' ' * 12}{part}" for part in definition[1:])
    if record.accession:
        lines.append(f"ACCESSION   {record.accession}")

    if record.features:
        lines.append("FEATURES             Location/Qualifiers")
        for feature in record.features:
            key = GENBANK_KEYS.get(feature.type, feature.type)
            lines.append(f"     {key:<15} {_format_location(feature, len(record.sequence))}")
            if "label" not in feature.metadata:
                lines.append(_format_qualifier("label", feature.name))
            lines.extend(_format_qualifier(k, v) for k, v in feature.metadata.items())

    lines.append("ORIGIN")
    seq = record.sequence.lower()
    for i in range(0, len(seq), 60):
        chunk = " ".join(seq[j : j + 10] for j in range(i, min(i + 60, len(seq)), 10))
        lines.append(f"{i + 1:>9} {chunk}")
    lines.append("//")
    return "\n".join(lines)


def records_to_genbank(records: Iterable[GenBankRecord]) -> str:
    """Render several records back to back."""
    return "\n".join(to_genbank(r) for r in records)
