"""Asset ingestion: turn an essence file path into an Asset.

WHY: Before an essence file can join a reel the packager needs to know
it exists, how large it is, and what the inspector says about it. Caller
overrides (forced aspect ratio, shortened duration, entry point) are
applied here, once, so every later stage sees the final values.

HOW: Open the file to prove it is readable, stat it for size, delegate
to the essence inspector, then apply the context overrides.

RULES:
- Unreadable path → FileOpenError, no asset is returned
- Inspector failure or UNKNOWN essence type → InvalidTrackTypeError
- Forced aspect ratio always wins
- Duration ceiling applies only when smaller than the natural duration;
  otherwise a warning is logged and the natural duration stays
- Entry point applies only when smaller than the (clamped) duration;
  otherwise a warning is logged and the entry point stays 0
- Namespace and track-count rules are NOT checked here
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional

from dcp_packager.core.classifier import classify
from dcp_packager.core.constants import EssenceType
from dcp_packager.core.errors import FileOpenError, InspectionError, InvalidTrackTypeError
from dcp_packager.core.factory import init_asset
from dcp_packager.core.inspector import EssenceInspector, SidecarInspector
from dcp_packager.core.ir import Asset, PackageContext

logger = logging.getLogger(__name__)


def add_asset(
    context: PackageContext,
    path: str | Path,
    inspector: Optional[EssenceInspector] = None,
) -> Asset:
    """Ingest one essence file.

    Args:
        context: Build context supplying the overrides.
        path: Path to the essence file.
        inspector: Essence metadata reader. Defaults to SidecarInspector.

    Returns:
        A populated Asset with overrides applied.

    Raises:
        FileOpenError: If the file cannot be opened for reading.
        InvalidTrackTypeError: If the essence type cannot be identified.
    """
    filename = str(path)
    logger.info("Adding asset %s", filename)

    try:
        with open(filename, "rb"):
            pass
    except OSError as e:
        logger.error("Could not open file: %s", filename)
        raise FileOpenError("Could not open file: {}".format(filename)) from e

    asset = init_asset()
    asset.filename = filename
    asset.annotation = os.path.basename(filename)
    asset.size = str(os.stat(filename).st_size)

    logger.debug("Reading %s asset information", filename)
    if inspector is None:
        inspector = SidecarInspector()
    try:
        info = inspector.inspect(filename)
    except InspectionError as e:
        logger.error("%s is not a proper essence file: %s", filename, e)
        raise InvalidTrackTypeError("{} is not a proper essence file".format(filename)) from e

    if info.essence_type == EssenceType.UNKNOWN:
        logger.error("%s is not a proper essence file", filename)
        raise InvalidTrackTypeError("{} is not a proper essence file".format(filename))

    asset.essence_type = info.essence_type
    asset.essence_class = classify(info.essence_type)
    asset.namespace = info.namespace
    asset.duration = info.duration
    asset.intrinsic_duration = info.duration
    asset.aspect_ratio = info.aspect_ratio
    asset.edit_rate = info.edit_rate
    asset.frame_rate = info.frame_rate
    asset.sample_rate = info.sample_rate
    asset.stereoscopic = info.stereoscopic

    _apply_overrides(context, asset)
    return asset


def _apply_overrides(context: PackageContext, asset: Asset) -> None:
    if context.aspect_ratio:
        asset.aspect_ratio = context.aspect_ratio

    if context.duration:
        if context.duration < asset.duration:
            asset.duration = context.duration
        else:
            logger.warning(
                "Desired duration %d cannot be greater than asset duration %d, ignoring value",
                context.duration, asset.duration,
            )

    if context.entry_point:
        if context.entry_point < asset.duration:
            asset.entry_point = context.entry_point
        else:
            logger.warning(
                "Desired entry point %d cannot be greater than asset duration %d, ignoring value",
                context.entry_point, asset.duration,
            )
