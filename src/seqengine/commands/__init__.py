"""CLI subcommand implementations."""

from . import (
    analyze,
    orfs,
    digest,
    primers,
    diff,
    motif,
    translate,
    optimize,
    convert,
)

__all__ = [
    "analyze",
    "orfs",
    "digest",
    "primers",
    "diff",
    "motif",
    "translate",
    "optimize",
    "convert",
]
