"""Essence type → track class mapping."""

from __future__ import annotations

from typing import Any

from dcp_packager.core.constants import AssetClass, EssenceType

_ESSENCE_CLASSES: dict[EssenceType, AssetClass] = {
    EssenceType.MPEG2_VES: AssetClass.PICTURE,
    EssenceType.JPEG_2000: AssetClass.PICTURE,
    EssenceType.JPEG_2000_S: AssetClass.PICTURE,
    EssenceType.PCM_24B_48K: AssetClass.SOUND,
    EssenceType.PCM_24B_96K: AssetClass.SOUND,
    EssenceType.TIMED_TEXT: AssetClass.TIMED_TEXT,
}


def classify(essence_type: Any) -> AssetClass:
    """Return the track class of an essence type.

    Any value outside the picture/sound/timed-text types, including values
    that are not EssenceType members at all, maps to AssetClass.UNKNOWN.
    Callers treat UNKNOWN as an error.
    """
    try:
        return _ESSENCE_CLASSES.get(EssenceType(essence_type), AssetClass.UNKNOWN)
    except ValueError:
        return AssetClass.UNKNOWN
