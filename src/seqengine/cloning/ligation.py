"""Join fragments end to end, carrying their features along."""

from collections.abc import Sequence

from seqengine.types import LigationInput, LigationResult
from seqengine.utils.ids import IdFactory, uuid_id


def ligate(
    fragments: Sequence[LigationInput],
    linker: str = "",
    id_factory: IdFactory = uuid_id,
) -> LigationResult:
    """
    Concatenate fragments in order, with an optional linker between them.

    Each carried feature is cloned with a new id and shifted by the offset
    of its fragment in the joined sequence.

    Args:
        fragments: Ordered fragments with their features
        linker: Sequence inserted between (never around) fragments, uppercased
        id_factory: Callable minting ids for the cloned features

    Returns:
        Joined sequence and shifted features
    """
    linker = linker.upper()
    parts: list[str] = []
    features = []
    offset = 0

    for i, fragment in enumerate(fragments):
        if i > 0 and linker:
            parts.append(linker)
            offset += len(linker)
        for feature in fragment.features:
            features.append(feature.shifted(offset, id_factory()))
        parts.append(fragment.sequence)
        offset += len(fragment.sequence)

    return LigationResult(sequence="".join(parts), features=features)
