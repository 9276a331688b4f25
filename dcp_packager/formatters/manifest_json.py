"""Manifest JSON formatter: schema-checked snapshot of the package tree.

WHY: XML writing and signing happen in external tools. They need the
assembled tree plus the dialect-specific URIs in a stable, machine
readable form, and they should never receive a tree that is missing
required fields.

HOW: The PackageContext is flattened into plain dicts: package-level
namespace and signature URIs, then PKLs → CPLs → reels → track slots.
The result is validated against package_manifest_schema.json before it
is returned.

RULES:
- Enum values are written by name ("SMPTE", "JPEG_2000", "PICTURE")
- Empty track slots are written as null
- CPL namespace uses the stereo table when any reel's picture is 3D
- Output suffix: "-manifest.json", media type "application/json"
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import jsonschema

from dcp_packager.core.constants import (
    DS_CMA,
    DS_DMA,
    DS_DSIG,
    DS_TMA,
    NS_AM,
    NS_PKL,
    RATING_AGENCY,
    XML_HEADER,
    cpl_namespace_uri,
    signature_method_uri,
)
from dcp_packager.core.ir import Asset, Cpl, PackageContext, Pkl, Reel
from dcp_packager.formatters.base import BaseFormatter, FormatterOutput

_SCHEMA_PATH = Path(__file__).resolve().parent / "package_manifest_schema.json"

_CACHED_SCHEMA: Optional[dict] = None


def _get_schema() -> dict:
    """Load and cache the package manifest JSON schema."""
    global _CACHED_SCHEMA
    if _CACHED_SCHEMA is None:
        with open(_SCHEMA_PATH) as f:
            _CACHED_SCHEMA = json.load(f)
    return _CACHED_SCHEMA


def _asset_dict(asset: Optional[Asset]) -> Optional[Dict[str, Any]]:
    if asset is None:
        return None
    return {
        "filename": asset.filename,
        "annotation": asset.annotation,
        "size": asset.size,
        "essence_type": asset.essence_type.name,
        "essence_class": asset.essence_class.name,
        "namespace": asset.namespace.name,
        "duration": asset.duration,
        "intrinsic_duration": asset.intrinsic_duration,
        "entry_point": asset.entry_point,
        "aspect_ratio": asset.aspect_ratio,
        "edit_rate": asset.edit_rate,
        "frame_rate": asset.frame_rate,
        "sample_rate": asset.sample_rate,
        "stereoscopic": asset.stereoscopic,
        "digest": asset.digest,
    }


def _reel_dict(reel: Reel) -> Dict[str, Any]:
    return {
        "uuid": reel.uuid,
        "annotation": reel.annotation,
        "main_picture": _asset_dict(reel.main_picture),
        "main_sound": _asset_dict(reel.main_sound),
        "main_subtitle": _asset_dict(reel.main_subtitle),
    }


def _is_stereoscopic(cpl: Cpl) -> bool:
    return any(
        reel.main_picture is not None and reel.main_picture.stereoscopic
        for reel in cpl.reels
    )


def _cpl_dict(cpl: Cpl, context: PackageContext) -> Dict[str, Any]:
    return {
        "uuid": cpl.uuid,
        "filename": cpl.filename,
        "namespace_uri": cpl_namespace_uri(context.namespace, _is_stereoscopic(cpl)),
        "issuer": cpl.issuer,
        "creator": cpl.creator,
        "annotation": cpl.annotation,
        "title": cpl.title,
        "kind": cpl.kind,
        "rating": cpl.rating,
        "rating_agency_uri": RATING_AGENCY[cpl.rating_agency],
        "timestamp": cpl.timestamp,
        "reels": [_reel_dict(reel) for reel in cpl.reels],
    }


def _pkl_dict(pkl: Pkl, context: PackageContext) -> Dict[str, Any]:
    return {
        "uuid": pkl.uuid,
        "filename": pkl.filename,
        "issuer": pkl.issuer,
        "creator": pkl.creator,
        "annotation": pkl.annotation,
        "timestamp": pkl.timestamp,
        "cpls": [_cpl_dict(cpl, context) for cpl in pkl.cpls],
    }


def build_manifest(context: PackageContext) -> Dict[str, Any]:
    """Flatten the package tree into a JSON-serializable dict."""
    return {
        "xml_header": XML_HEADER,
        "namespace": context.namespace.name,
        "namespaces": {
            "pkl": NS_PKL[context.namespace],
            "asset_map": NS_AM[context.namespace],
        },
        "signature": {
            "dsig": DS_DSIG,
            "canonicalization_method": DS_CMA,
            "digest_method": DS_DMA,
            "transform": DS_TMA,
            "signature_method": signature_method_uri(context.namespace),
        },
        "pkls": [_pkl_dict(pkl, context) for pkl in context.pkls],
    }


class ManifestJsonFormatter(BaseFormatter):
    """Formatter that exports the package tree as validated JSON."""

    @property
    def name(self) -> str:
        return "Manifest JSON"

    def format(self, context: PackageContext) -> List[FormatterOutput]:
        """Export the package tree.

        Raises:
            jsonschema.ValidationError: If the manifest does not conform to
                the bundled schema.
        """
        manifest = build_manifest(context)
        jsonschema.validate(instance=manifest, schema=_get_schema())
        content = json.dumps(manifest, indent=2, ensure_ascii=False)
        return [
            FormatterOutput(
                suffix="-manifest.json",
                content=content,
                media_type="application/json",
            )
        ]
