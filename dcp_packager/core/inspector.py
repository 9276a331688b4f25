"""Essence inspection: the interface and a sidecar-file implementation.

WHY: Reading duration, frame rate, and dialect out of MXF bitstreams is
the job of a dedicated essence library, not of the package assembler.
The ingestor only needs a small contract (path in, EssenceInfo out) so
any inspector (an MXF reader, a test stub, a metadata cache) can plug in.

HOW: EssenceInspector is the ABC. SidecarInspector serves pre-ingested
essence: the metadata was extracted when the essence was wrapped and
saved next to it as ``{filename}.essence.json``. The sidecar is checked
with jsonschema before it is trusted.

RULES:
- Sidecar path: the essence path with ".essence.json" appended
- Required keys: essence_type (EssenceType name), namespace
  ("INTEROP" or "SMPTE"), duration (frames, ≥ 1)
- Frame counts are stored as int even when written as 120.0
- Optional keys: aspect_ratio, edit_rate, frame_rate, sample_rate,
  stereoscopic
- Every failure raises InspectionError
"""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path

import jsonschema

from dcp_packager.core.constants import EssenceType, XmlNamespace
from dcp_packager.core.errors import InspectionError

SIDECAR_SUFFIX = ".essence.json"

SIDECAR_SCHEMA: dict = {
    "type": "object",
    "required": ["essence_type", "namespace", "duration"],
    "properties": {
        "essence_type": {"enum": [member.name for member in EssenceType]},
        "namespace": {"enum": ["INTEROP", "SMPTE"]},
        "duration": {"type": "integer", "minimum": 1},
        "aspect_ratio": {"type": "string"},
        "edit_rate": {"type": "string"},
        "frame_rate": {"type": "integer", "minimum": 0},
        "sample_rate": {"type": "string"},
        "stereoscopic": {"type": "boolean"},
    },
}


@dataclass
class EssenceInfo:
    """Metadata an inspector reports for one essence file."""

    essence_type: EssenceType
    namespace: XmlNamespace
    duration: int
    aspect_ratio: str = ""
    edit_rate: str = ""
    frame_rate: int = 0
    sample_rate: str = ""
    stereoscopic: bool = False


class EssenceInspector(ABC):
    """Abstract base for essence metadata readers."""

    @abstractmethod
    def inspect(self, path: str | Path) -> EssenceInfo:
        """Read essence metadata for ``path``.

        Raises:
            InspectionError: If the file is not a readable essence file.
        """


def sidecar_path(path: str | Path) -> Path:
    """Return the sidecar metadata path for an essence file."""
    return Path(str(path) + SIDECAR_SUFFIX)


class SidecarInspector(EssenceInspector):
    """Reads essence metadata from a JSON sidecar next to the essence file."""

    def inspect(self, path: str | Path) -> EssenceInfo:
        meta_path = sidecar_path(path)
        if not meta_path.is_file():
            raise InspectionError("No essence metadata found at {}".format(meta_path))

        try:
            data = json.loads(meta_path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            raise InspectionError("Could not read {}: {}".format(meta_path, e)) from e

        try:
            jsonschema.validate(instance=data, schema=SIDECAR_SCHEMA)
        except jsonschema.ValidationError as e:
            raise InspectionError("Invalid essence metadata in {}: {}".format(
                meta_path, e.message
            )) from e

        return EssenceInfo(
            essence_type=EssenceType[data["essence_type"]],
            namespace=XmlNamespace[data["namespace"]],
            duration=int(data["duration"]),
            aspect_ratio=data.get("aspect_ratio", ""),
            edit_rate=data.get("edit_rate", ""),
            frame_rate=int(data.get("frame_rate", 0)),
            sample_rate=data.get("sample_rate", ""),
            stereoscopic=data.get("stereoscopic", False),
        )
