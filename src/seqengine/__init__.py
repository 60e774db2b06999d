"""seqengine - deterministic DNA/RNA/protein sequence computations."""

__version__ = "0.1.0"
