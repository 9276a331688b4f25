"""Reel conformance validation.

WHY: A reel that reaches a cinema server with no picture, with mixed
Interop/SMPTE tracks, or with tracks of different lengths is rejected or
plays out of sync. These are the rules every reel must pass before it is
added to a CPL.

HOW: validate_reel() runs three checks in a fixed order and stops at the
first failure. The last check repairs rather than rejects: mismatched
durations are trimmed to the shortest track.

RULES:
- Order: picture presence → namespace agreement → duration reconciliation
- No picture → NoPictureTrackError
- Sound or subtitle namespace differs from picture → SpecificationMismatchError
- Durations: d starts at the picture duration; sound then subtitle each
  lower d to their own duration when they differ. On any difference every
  present track is set to d and a warning names d
- A sound or subtitle track with no frames never lowers d
- Matching durations are left untouched
- Reel numbers in messages are 1-based
"""

from __future__ import annotations

import logging

from dcp_packager.core.assembler import SPECIFICATION_MISMATCH_MESSAGE
from dcp_packager.core.constants import AssetClass
from dcp_packager.core.errors import NoPictureTrackError, SpecificationMismatchError
from dcp_packager.core.ir import Reel

logger = logging.getLogger(__name__)


def validate_reel(reel: Reel, reel_index: int) -> int:
    """Validate a reel and reconcile its track durations.

    Args:
        reel: The reel with all intended tracks attached.
        reel_index: 0-based position of the reel, used in messages.

    Returns:
        The reel duration in frames after reconciliation.

    Raises:
        NoPictureTrackError: If the reel has no picture track.
        SpecificationMismatchError: If a sound or subtitle track is not in
            the picture track's dialect.
    """
    reel_number = reel_index + 1
    logger.debug("Validating reel %d", reel_number)

    picture = reel.main_picture
    if picture is None or picture.essence_class != AssetClass.PICTURE:
        logger.error("Reel %d has no picture track", reel_number)
        raise NoPictureTrackError("Reel {} has no picture track".format(reel_number))

    for track in (reel.main_sound, reel.main_subtitle):
        if track is not None and track.namespace != picture.namespace:
            logger.error(SPECIFICATION_MISMATCH_MESSAGE)
            raise SpecificationMismatchError(
                "Reel {}: {}".format(reel_number, SPECIFICATION_MISMATCH_MESSAGE)
            )

    duration = picture.duration
    mismatch = False
    for track in (reel.main_sound, reel.main_subtitle):
        if track is not None and track.duration and track.duration != duration:
            mismatch = True
            duration = min(duration, track.duration)

    if mismatch:
        for track in reel.tracks():
            track.duration = duration
        logger.warning(
            "Asset duration mismatch, adjusting all durations to shortest asset duration of %d frames",
            duration,
        )

    return duration
