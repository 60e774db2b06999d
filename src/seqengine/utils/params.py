"""Parameter file parsing utilities."""

from pathlib import Path
from typing import Any


def parse_params(param_file: str | Path) -> dict[str, Any]:
    """
    Parse a params.txt file of ``NAME = value`` lines.

    Numeric values are parsed as float first, then cast where needed.
    Lines starting with ``#`` and blank lines are skipped.

    Args:
        param_file: Path to the parameters file

    Returns:
        Dictionary of parameter name -> value

    Raises:
        FileNotFoundError: If the parameters file does not exist
    """
    param_file = Path(param_file)
    if not param_file.exists():
        raise FileNotFoundError(f"Parameters file not found: {param_file}")

    params = {}
    with open(param_file) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            if "=" in line:
                name, value = line.split("=", 1)
                name = name.strip()
                value = value.strip()
                try:
                    params[name] = float(value)
                except ValueError:
                    params[name] = value
    return params


def _as_int(params: dict, name: str, default: int) -> int:
    value = params.get(name, default)
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _as_float(params: dict, name: str, default: float) -> float:
    value = params.get(name, default)
    try:
        return float(value)
    except (TypeError, ValueError):
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def get_primer_params(params: dict) -> dict:
    """
    Extract primer design parameters from parsed params dict.

    Raises:
        ValueError: If a value is not numeric or the ranges are inconsistent
    """
    primer = {
        "min_length": _as_int(params, "PRIMER_MIN_LEN", 18),
        "max_length": _as_int(params, "PRIMER_MAX_LEN", 28),
        "target_tm": _as_float(params, "TM_TARGET", 60),
        "tm_tolerance": _as_float(params, "TM_TOLERANCE", 3),
        "min_gc": _as_float(params, "GC_MIN", 0.30),
        "max_gc": _as_float(params, "GC_MAX", 0.70),
        "max_tm_diff": _as_float(params, "MAX_TM_DIFF", 5),
        "max_pairs": _as_int(params, "MAX_PAIRS", 10),
        "forward_tail": str(params.get("FORWARD_TAIL", "")),
        "reverse_tail": str(params.get("REVERSE_TAIL", "")),
    }
    if primer["min_length"] > primer["max_length"]:
        raise ValueError(
            f"PRIMER_MIN_LEN ({primer['min_length']}) exceeds PRIMER_MAX_LEN ({primer['max_length']})"
        )
    for name in ("min_gc", "max_gc"):
        if not 0.0 <= primer[name] <= 1.0:
            raise ValueError(f"GC bounds are fractions in [0, 1], got {name}={primer[name]}")
    if primer["min_gc"] > primer["max_gc"]:
        raise ValueError("GC_MIN exceeds GC_MAX")
    return primer


def get_orf_params(params: dict) -> dict:
    """Extract ORF search parameters from parsed params dict."""
    return {"min_amino_acids": _as_int(params, "ORF_MIN_AA", 30)}


def get_digest_params(params: dict) -> dict:
    """Extract restriction digest parameters from parsed params dict."""
    topology = str(params.get("TOPOLOGY", "linear")).lower()
    if topology not in ("linear", "circular"):
        raise ValueError(f"TOPOLOGY must be 'linear' or 'circular', got {topology!r}")
    enzymes = [e.strip() for e in str(params.get("ENZYMES", "")).split(",") if e.strip()]
    return {"topology": topology, "enzymes": enzymes}


def get_codon_params(params: dict) -> dict:
    """Extract codon optimisation parameters from parsed params dict."""
    frame = _as_int(params, "FRAME", 0)
    if frame not in (0, 1, 2):
        raise ValueError(f"FRAME must be 0, 1 or 2, got {frame}")
    return {"organism": str(params.get("ORGANISM", "ecoli")).lower(), "frame": frame}
