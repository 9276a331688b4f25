"""Entity construction: build context, PKL, CPL, reel, and asset records.

WHY: Every PKL, CPL, and reel starts from the same build-wide defaults
and needs a fresh identifier. PKL and CPL also need a filename that
serializers and signers will use, so the naming rule lives in exactly
one place.

HOW: create_context() turns validated PackageOptions into a
PackageContext. The entity factories copy descriptive fields from the
context, draw a UUID from ``context.new_uuid``, and derive filenames
with build_filename().

RULES:
- Filename: "<PREFIX>_<basename>.xml" with a basename override,
  otherwise "<PREFIX>_<uuid>.xml"
- Reels get a uuid but no filename; assets get neither
- Timestamps are UTC ISO-8601 with seconds precision
- Invalid options raise FatalError (the context cannot be built)
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Optional

from pydantic import ValidationError

from dcp_packager import config
from dcp_packager.core.errors import FatalError
from dcp_packager.core.ir import Asset, Cpl, PackageContext, Pkl, Reel, random_uuid
from dcp_packager.options import PackageOptions

logger = logging.getLogger(__name__)

PKL_PREFIX = "PKL"
CPL_PREFIX = "CPL"


def generate_timestamp() -> str:
    """Return the current UTC time, e.g. ``2026-10-16T12:00:00+00:00``."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


def build_filename(prefix: str, uuid: str, basename: str = "") -> str:
    """Derive a manifest filename from its prefix, uuid, and basename override."""
    if basename:
        return "{}_{}.xml".format(prefix, basename)
    return "{}_{}.xml".format(prefix, uuid)


def create_context(
    options: Optional[PackageOptions | dict] = None,
    new_uuid: Callable[[], str] = random_uuid,
    clock: Callable[[], str] = generate_timestamp,
) -> PackageContext:
    """Create the build context for one package.

    Args:
        options: PackageOptions (or a dict of its fields). None uses defaults.
        new_uuid: Identifier generator used by every entity factory.
        clock: Timestamp generator, called once for the whole build.

    Returns:
        A PackageContext with defaults and overrides applied.

    Raises:
        FatalError: If the options fail validation.
    """
    if options is None:
        options = PackageOptions()
    elif isinstance(options, dict):
        try:
            options = PackageOptions(**options)
        except ValidationError as e:
            logger.error("Invalid package options: %s", e)
            raise FatalError("Invalid package options: {}".format(e)) from e

    app_label = "{} {}".format(config.APP_NAME, config.APP_VERSION)

    context = PackageContext(
        issuer=options.issuer if options.issuer is not None else app_label,
        creator=options.creator if options.creator is not None else app_label,
        annotation=options.annotation if options.annotation is not None else config.DEFAULT_ANNOTATION,
        title=options.title if options.title is not None else config.DEFAULT_TITLE,
        kind=options.kind if options.kind is not None else config.DEFAULT_KIND,
        rating=options.rating,
        rating_agency=options.rating_agency,
        timestamp=clock(),
        basename=options.basename,
        aspect_ratio=options.aspect_ratio,
        duration=options.duration,
        entry_point=options.entry_point,
        max_reels=options.max_reels,
        max_cpls=options.max_cpls,
        max_pkls=options.max_pkls,
        new_uuid=new_uuid,
    )
    logger.debug("Created package context (timestamp %s)", context.timestamp)
    return context


def create_pkl(context: PackageContext) -> Pkl:
    """Create an empty packing list from the context's descriptive fields."""
    uuid = context.new_uuid()
    return Pkl(
        issuer=context.issuer,
        creator=context.creator,
        annotation=context.annotation,
        timestamp=context.timestamp,
        uuid=uuid,
        filename=build_filename(PKL_PREFIX, uuid, context.basename),
        capacity=context.max_cpls,
    )


def create_cpl(context: PackageContext) -> Cpl:
    """Create an empty content playlist from the context's descriptive fields."""
    uuid = context.new_uuid()
    return Cpl(
        issuer=context.issuer,
        creator=context.creator,
        annotation=context.annotation,
        title=context.title,
        kind=context.kind,
        rating=context.rating,
        rating_agency=context.rating_agency,
        timestamp=context.timestamp,
        uuid=uuid,
        filename=build_filename(CPL_PREFIX, uuid, context.basename),
        capacity=context.max_reels,
    )


def create_reel(context: PackageContext) -> Reel:
    """Create an empty reel carrying the context annotation."""
    return Reel(annotation=context.annotation, uuid=context.new_uuid())


def init_asset() -> Asset:
    """Return an empty asset record. Assets have no identifier of their own."""
    return Asset()
