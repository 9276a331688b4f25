"""Reel assembly: place classified assets into reel slots.

WHY: A DCP must be written entirely in one dialect: every asset Interop
or every asset SMPTE. The first asset attached decides the dialect for
the whole package, so a mismatch is caught the moment it is attached
rather than when the XML is written.

HOW: add_asset_to_reel() records or checks the package namespace, then
classifies the asset and stores a copy of it in the matching slot.

RULES:
- First attach anywhere sets context.namespace
- Later attaches must match it → SpecificationMismatchError otherwise
- Picture → main_picture, sound → main_sound, timed text → main_subtitle
- An occupied slot is overwritten
- UNKNOWN class → DcpError; the reel is left untouched on any failure
"""

from __future__ import annotations

import dataclasses
import logging

from dcp_packager.core.classifier import classify
from dcp_packager.core.constants import AssetClass, XmlNamespace
from dcp_packager.core.errors import DcpError, SpecificationMismatchError
from dcp_packager.core.ir import Asset, PackageContext, Reel

logger = logging.getLogger(__name__)

_SLOTS: dict[AssetClass, str] = {
    AssetClass.PICTURE: "main_picture",
    AssetClass.SOUND: "main_sound",
    AssetClass.TIMED_TEXT: "main_subtitle",
}

SPECIFICATION_MISMATCH_MESSAGE = (
    "DCP specification mismatch in assets. "
    "Please make sure all assets are MXF Interop or SMPTE"
)


def add_asset_to_reel(context: PackageContext, reel: Reel, asset: Asset) -> None:
    """Attach an asset to the reel slot matching its track class.

    Raises:
        SpecificationMismatchError: If the asset's namespace differs from
            the namespace already detected for the package.
        DcpError: If the asset's essence type has no track class.
    """
    logger.info("Adding asset %s to reel", asset.annotation or asset.filename)

    if context.namespace == XmlNamespace.UNKNOWN:
        context.namespace = XmlNamespace(asset.namespace)
        logger.debug("Label type detected: %s", context.namespace.name)
    elif context.namespace != asset.namespace:
        logger.error(SPECIFICATION_MISMATCH_MESSAGE)
        raise SpecificationMismatchError(SPECIFICATION_MISMATCH_MESSAGE)

    asset_class = classify(asset.essence_type)
    slot = _SLOTS.get(asset_class)
    if slot is None:
        logger.error("Unsupported essence type %s for %s", asset.essence_type, asset.filename)
        raise DcpError("Unsupported essence type for {}".format(asset.filename))

    logger.debug("Adding %s", slot)
    setattr(reel, slot, dataclasses.replace(asset, essence_class=asset_class))
