"""Error codes and the exception hierarchy for package assembly.

WHY: Every failure in the pipeline is a deterministic problem with the
input data: a missing file, an unrecognized essence, a reel without a
picture. Callers (the CLI, tests, future services) need to tell these
apart, and the CLI reports them as small integer exit codes.

HOW: ``ErrorCode`` enumerates the codes. Each exception subclass pins its
code as a class attribute so ``exc.code`` always identifies the failure.

RULES:
- DcpError is the base class and carries ErrorCode.ERROR
- Subclasses never override __init__; the message is the only argument
- MULTIPLE_PICTURE_TRACK is kept in the enumeration for compatibility
  only; a reel has a single picture slot so nothing raises it
"""

from __future__ import annotations

import enum


class ErrorCode(enum.IntEnum):
    """Result codes reported for assembly failures."""

    NO_ERROR = 0
    ERROR = 1
    FILEOPEN = 2
    INVALID_TRACK_TYPE = 3
    NO_PICTURE_TRACK = 4
    MULTIPLE_PICTURE_TRACK = 5
    SPECIFICATION_MISMATCH = 6
    CAPACITY_EXCEEDED = 7
    FATAL = 8


class DcpError(Exception):
    """Base class for every package assembly failure."""

    code: ErrorCode = ErrorCode.ERROR


class FileOpenError(DcpError):
    """An essence file could not be opened for reading."""

    code = ErrorCode.FILEOPEN


class InvalidTrackTypeError(DcpError):
    """The essence inspector could not identify the essence type."""

    code = ErrorCode.INVALID_TRACK_TYPE


class NoPictureTrackError(DcpError):
    """A reel was validated without a picture track."""

    code = ErrorCode.NO_PICTURE_TRACK


class SpecificationMismatchError(DcpError):
    """Assets disagree on Interop vs SMPTE."""

    code = ErrorCode.SPECIFICATION_MISMATCH


class CapacityExceededError(DcpError):
    """A parent entity is already holding its maximum number of children."""

    code = ErrorCode.CAPACITY_EXCEEDED


class FatalError(DcpError):
    """The build cannot continue; the caller should discard the context."""

    code = ErrorCode.FATAL


class InspectionError(Exception):
    """Raised by essence inspectors when metadata cannot be read.

    The ingestor converts this into InvalidTrackTypeError.
    """
