"""Identifier generators for synthesized annotation records."""

import uuid
from typing import Callable

IdFactory = Callable[[], str]


def uuid_id() -> str:
    """Random opaque identifier."""
    return str(uuid.uuid4())


class FeatureIdGenerator:
    """
    Monotonic ``feat_<n>`` identifiers.

    Each instance owns its counter; create one per session or per call
    so that independent callers never share state.
    """

    def __init__(self, prefix: str = "feat", start: int = 0):
        self.prefix = prefix
        self._counter = start

    def __call__(self) -> str:
        self._counter += 1
        return f"{self.prefix}_{self._counter}"

    @property
    def issued(self) -> int:
        return self._counter
