"""Intermediate representation dataclasses for an assembled DCP.

WHY: The package is a strict ownership tree: context → PKL → CPL → Reel
→ Asset. Assembly, validation, and every formatter need the same typed
view of that tree, so the IR is the contract between them.

HOW: Dataclasses form the hierarchy:
  Asset         : one essence file with its metadata and overrides applied
  Reel          : fixed-shape bundle of picture / sound / subtitle slots
  Cpl           : ordered reels making up one presentation
  Pkl           : ordered CPLs delivered together
  PackageContext: build-wide defaults, overrides, detected namespace, PKLs
Progress notifications are ProgressCallback strategy objects grouped in
Callbacks.

RULES:
- Reels hold at most one asset per track class (three named slots)
- uuid and filename are assigned once at creation and cannot be reassigned
- Parents own their children; aggregators store copies, never references
- Asset.size is the byte count as a decimal string
- Asset.digest is left empty; it is computed by an external signer
- Capacities and max_* limits default to the configured limits in config
"""

from __future__ import annotations

import uuid as uuid_mod
from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, List, Optional

from dcp_packager import config
from dcp_packager.core.constants import AssetClass, EssenceType, RatingAgency, XmlNamespace


def random_uuid() -> str:
    """Return a fresh 36-character random UUID string."""
    return str(uuid_mod.uuid4())


def _null_callback(argument: Any) -> None:
    return None


@dataclass
class ProgressCallback:
    """A progress hook: a callable plus the opaque argument it receives.

    WHY: Essence writing and signing report progress (frames written,
    files finished, digest updates). Callers that do not care get a no-op.

    HOW: Calling the object invokes ``callback(argument)`` synchronously.
    """

    callback: Callable[[Any], Any] = _null_callback
    argument: Any = None

    def __call__(self) -> None:
        self.callback(self.argument)


@dataclass
class Callbacks:
    """The four progress hooks exposed to writing and signing stages."""

    frame_done: ProgressCallback = field(default_factory=ProgressCallback)
    file_done: ProgressCallback = field(default_factory=ProgressCallback)
    digest_update: ProgressCallback = field(default_factory=ProgressCallback)
    digest_done: ProgressCallback = field(default_factory=ProgressCallback)


class _WriteOnceIdentity:
    """Mixin that refuses to reassign uuid/filename once they hold a value."""

    _WRITE_ONCE = ("uuid", "filename")

    def __setattr__(self, name: str, value: Any) -> None:
        if name in self._WRITE_ONCE and getattr(self, name, ""):
            raise AttributeError(
                "{} of {} is fixed at creation".format(name, type(self).__name__)
            )
        super().__setattr__(name, value)


@dataclass
class Asset:
    """One essence file ready to be placed into a reel.

    RULES:
    - filename: path as given to the ingestor
    - annotation: basename of the path
    - duration: frames after overrides and reel reconciliation
    - intrinsic_duration: frames as reported by the inspector
    - entry_point: first frame to play, 0 unless overridden
    """

    filename: str = ""
    annotation: str = ""
    size: str = ""
    essence_type: EssenceType = EssenceType.UNKNOWN
    essence_class: AssetClass = AssetClass.UNKNOWN
    namespace: XmlNamespace = XmlNamespace.UNKNOWN
    duration: int = 0
    intrinsic_duration: int = 0
    entry_point: int = 0
    aspect_ratio: str = ""
    edit_rate: str = ""
    frame_rate: int = 0
    sample_rate: str = ""
    stereoscopic: bool = False
    digest: str = ""


@dataclass
class Reel(_WriteOnceIdentity):
    """A synchronized bundle of at most one picture, sound, and subtitle track."""

    annotation: str = ""
    uuid: str = ""
    main_picture: Optional[Asset] = None
    main_sound: Optional[Asset] = None
    main_subtitle: Optional[Asset] = None

    def tracks(self) -> Iterator[Asset]:
        """Yield the occupied slots in picture, sound, subtitle order."""
        for asset in (self.main_picture, self.main_sound, self.main_subtitle):
            if asset is not None:
                yield asset


@dataclass
class Cpl(_WriteOnceIdentity):
    """Content playlist: the ordered reels of one presentation."""

    issuer: str = ""
    creator: str = ""
    annotation: str = ""
    title: str = ""
    kind: str = ""
    rating: str = ""
    rating_agency: RatingAgency = RatingAgency.NONE
    timestamp: str = ""
    uuid: str = ""
    filename: str = ""
    capacity: int = config.MAX_REELS
    reels: List[Reel] = field(default_factory=list)

    @property
    def reel_count(self) -> int:
        return len(self.reels)


@dataclass
class Pkl(_WriteOnceIdentity):
    """Packing list: the CPLs delivered together in one package."""

    issuer: str = ""
    creator: str = ""
    annotation: str = ""
    timestamp: str = ""
    uuid: str = ""
    filename: str = ""
    capacity: int = config.MAX_CPLS
    cpls: List[Cpl] = field(default_factory=list)

    @property
    def cpl_count(self) -> int:
        return len(self.cpls)


@dataclass
class PackageContext:
    """Build-wide state passed explicitly through every assembly call.

    WHY: Descriptive defaults, caller overrides, and the package-wide
    namespace must be shared by every entity of one build without hidden
    global state.

    HOW: Created by ``factory.create_context``; entity factories copy
    descriptive fields from it, the ingestor reads its overrides, the
    reel assembler records the detected namespace, and
    ``add_pkl_to_context`` appends finished packing lists.

    RULES:
    - basename / aspect_ratio: "" means no override
    - duration / entry_point: None means no override
    - namespace stays UNKNOWN until the first asset is attached
    - new_uuid is the identifier generator used by every entity factory
    """

    issuer: str = ""
    creator: str = ""
    annotation: str = ""
    title: str = ""
    kind: str = ""
    rating: str = ""
    rating_agency: RatingAgency = RatingAgency.NONE
    timestamp: str = ""
    basename: str = ""
    aspect_ratio: str = ""
    duration: Optional[int] = None
    entry_point: Optional[int] = None
    namespace: XmlNamespace = XmlNamespace.UNKNOWN
    max_reels: int = config.MAX_REELS
    max_cpls: int = config.MAX_CPLS
    max_pkls: int = config.MAX_PKLS
    pkls: List[Pkl] = field(default_factory=list)
    callbacks: Callbacks = field(default_factory=Callbacks)
    new_uuid: Callable[[], str] = random_uuid

    @property
    def pkl_count(self) -> int:
        return len(self.pkls)
