"""Shared test fixtures for the dcp_packager test suite.

WHY: Most tests need the same building blocks: a build context with
predictable identifiers, assets with chosen metadata, essence files on
disk, and an inspector that reports preset metadata without real MXF
files.

HOW: Pytest fixtures provide a deterministic context, asset factories
for each track class, a StubInspector keyed by file name, and a factory
that writes an essence file plus its JSON sidecar into tmp_path.

RULES:
- UUIDs come from a counter so filenames are reproducible
- The timestamp is fixed
- Essence files contain a few dummy bytes; only their size matters
"""

import itertools
import json
from pathlib import Path
from typing import Dict

import pytest

from dcp_packager.core.classifier import classify
from dcp_packager.core.constants import EssenceType, XmlNamespace
from dcp_packager.core.errors import InspectionError
from dcp_packager.core.factory import create_context
from dcp_packager.core.inspector import EssenceInfo, EssenceInspector, sidecar_path
from dcp_packager.core.ir import Asset

FIXED_TIMESTAMP = "2026-10-16T12:00:00+00:00"


def _counting_uuids():
    counter = itertools.count(1)
    return lambda: "00000000-0000-4000-8000-{:012d}".format(next(counter))


class StubInspector(EssenceInspector):
    """Inspector that returns preset EssenceInfo by file name."""

    def __init__(self, infos: Dict[str, EssenceInfo]):
        self.infos = infos
        self.calls = []

    def inspect(self, path):
        self.calls.append(str(path))
        name = Path(path).name
        if name not in self.infos:
            raise InspectionError("unknown essence {}".format(name))
        return self.infos[name]


@pytest.fixture
def context():
    """A default build context with deterministic uuids and timestamp."""
    return create_context(new_uuid=_counting_uuids(), clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def uuid_counter():
    """Factory for a fresh deterministic uuid generator."""
    return _counting_uuids


@pytest.fixture
def make_asset():
    """Factory building an Asset the way the ingestor would, without disk I/O."""

    def _make(essence_type=EssenceType.JPEG_2000, namespace=XmlNamespace.SMPTE,
              duration=100, name="asset.mxf"):
        return Asset(
            filename="/media/" + name,
            annotation=name,
            size="1024",
            essence_type=essence_type,
            essence_class=classify(essence_type),
            namespace=namespace,
            duration=duration,
            intrinsic_duration=duration,
        )

    return _make


@pytest.fixture
def picture(make_asset):
    def _make(duration=100, namespace=XmlNamespace.SMPTE):
        return make_asset(EssenceType.JPEG_2000, namespace, duration, "picture.mxf")
    return _make


@pytest.fixture
def sound(make_asset):
    def _make(duration=100, namespace=XmlNamespace.SMPTE):
        return make_asset(EssenceType.PCM_24B_48K, namespace, duration, "sound.mxf")
    return _make


@pytest.fixture
def subtitle(make_asset):
    def _make(duration=100, namespace=XmlNamespace.SMPTE):
        return make_asset(EssenceType.TIMED_TEXT, namespace, duration, "subtitle.mxf")
    return _make


@pytest.fixture
def stub_inspector():
    """Factory: ``stub_inspector({"pic.mxf": EssenceInfo(...)})``."""
    return StubInspector


@pytest.fixture
def essence_file(tmp_path):
    """Factory writing an essence file and its sidecar metadata.

    Usage: ``essence_file("pic.mxf", essence_type="JPEG_2000", duration=240)``
    """

    def _make(name, essence_type="JPEG_2000", namespace="SMPTE", duration=100, **extra):
        path = tmp_path / name
        path.write_bytes(b"\x00" * 16)
        meta = {"essence_type": essence_type, "namespace": namespace, "duration": duration}
        meta.update(extra)
        sidecar_path(path).write_text(json.dumps(meta), encoding="utf-8")
        return path

    return _make
