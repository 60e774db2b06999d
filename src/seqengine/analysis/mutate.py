"""Point edits that keep scars and feature coordinates consistent.

Every function returns a new ``MutationResult`` and leaves its inputs
untouched. Out-of-range edits return copies of the inputs unchanged. Scar
timestamps come from ``clock`` (milliseconds since the epoch by default).
"""

import time
from collections.abc import Callable
from dataclasses import replace

from seqengine.types import Feature, MutationResult, MutationScar
from seqengine.utils.ids import IdFactory, uuid_id


def _now_ms() -> float:
    return time.time() * 1000


def _unchanged(raw: str, scars: list[MutationScar], features: list[Feature]) -> MutationResult:
    return MutationResult(raw=raw, scars=list(scars), features=list(features))


def apply_substitution(
    raw: str,
    scars: list[MutationScar],
    features: list[Feature],
    pos: int,
    new_base: str,
    id_factory: IdFactory = uuid_id,
    clock: Callable[[], float] = _now_ms,
) -> MutationResult:
    """Replace the base at ``pos``; any earlier scar there is superseded."""
    if pos < 0 or pos >= len(raw):
        return _unchanged(raw, scars, features)

    scar = MutationScar(
        id=id_factory(),
        position=pos,
        type="substitution",
        original=raw[pos],
        created_at=clock(),
    )
    kept = [s for s in scars if s.position != pos]
    return MutationResult(
        raw=raw[:pos] + new_base + raw[pos + 1 :],
        scars=kept + [scar],
        features=list(features),
    )


def apply_insertion(
    raw: str,
    scars: list[MutationScar],
    features: list[Feature],
    pos: int,
    bases: str,
    id_factory: IdFactory = uuid_id,
    clock: Callable[[], float] = _now_ms,
) -> MutationResult:
    """
    Insert ``bases`` after index ``pos`` (``-1`` prepends).

    Scars and feature ends strictly after ``pos`` shift by the insert
    length; each inserted base gets its own insertion scar.
    """
    if not bases or pos < -1 or pos > len(raw) - 1:
        return _unchanged(raw, scars, features)

    index = pos + 1
    delta = len(bases)
    shifted_scars = [
        replace(s, position=s.position + delta) if s.position > pos else replace(s)
        for s in scars
    ]
    shifted_features = [
        replace(
            f,
            start=f.start + delta if f.start > pos else f.start,
            end=f.end + delta if f.end > pos else f.end,
        )
        for f in features
    ]
    now = clock()
    inserted = [
        MutationScar(id=id_factory(), position=index + i, type="insertion", inserted=base, created_at=now)
        for i, base in enumerate(bases)
    ]
    return MutationResult(
        raw=raw[:index] + bases + raw[index:],
        scars=shifted_scars + inserted,
        features=shifted_features,
    )


def apply_deletion(
    raw: str,
    scars: list[MutationScar],
    features: list[Feature],
    pos: int,
    count: int,
    id_factory: IdFactory = uuid_id,
    clock: Callable[[], float] = _now_ms,
) -> MutationResult:
    """
    Remove ``count`` bases from ``pos`` (clamped to the sequence end).

    Scars inside the deleted range are dropped and a single deletion scar
    records the removed bases. Feature ends inside the range collapse to
    ``pos``; features left empty are removed.
    """
    if count <= 0 or pos < 0 or pos >= len(raw):
        return _unchanged(raw, scars, features)

    count = min(count, len(raw) - pos)
    stop = pos + count

    kept_scars = []
    for s in scars:
        if s.position < pos:
            kept_scars.append(replace(s))
        elif s.position >= stop:
            kept_scars.append(replace(s, position=s.position - count))

    def _move(coord: int) -> int:
        if coord >= stop:
            return coord - count
        if coord > pos:
            return pos
        return coord

    moved = [replace(f, start=_move(f.start), end=_move(f.end)) for f in features]
    scar = MutationScar(
        id=id_factory(),
        position=pos,
        type="deletion",
        original=raw[pos:stop],
        created_at=clock(),
    )
    return MutationResult(
        raw=raw[:pos] + raw[stop:],
        scars=kept_scars + [scar],
        features=[f for f in moved if f.end > f.start],
    )
