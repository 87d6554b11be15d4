"""User modulation effect definitions."""

from __future__ import annotations

from enum import IntEnum


class ModFxParamId(IntEnum):
    """User-facing modulation effect parameters."""

    TIME = 0
    DEPTH = 1


NUM_MODFX_PARAMS = len(ModFxParamId)

PARAM_RESOLUTION_BITS = 10


def modfx_param_id(index: int) -> ModFxParamId:
    """Map a raw parameter index to its id, raising ValueError for unknown ones."""
    try:
        return ModFxParamId(index)
    except ValueError:
        raise ValueError(f"unknown modulation effect parameter index {index}") from None