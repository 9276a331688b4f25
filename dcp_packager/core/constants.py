"""Enumerations, namespace URI tables, and signature constants.

WHY: A DCP is written in one of two dialects (legacy MXF Interop or
SMPTE) and the dialect decides every schema URI and the signature
algorithm. Keeping these tables as plain data makes it obvious which URI
belongs to which dialect.

HOW: Each table is a tuple indexed by ``XmlNamespace`` (UNKNOWN=0,
INTEROP=1, SMPTE=2). Lookup helpers turn a namespace value into the URI a
serializer needs.

RULES:
- Index 0 of every table is the "none" placeholder
- The 3D CPL table applies when the picture track is stereoscopic
- Signature method: Interop → RSA-SHA1, SMPTE → RSA-SHA256
"""

from __future__ import annotations

import enum


class XmlNamespace(enum.IntEnum):
    """Specification dialect of a package."""

    UNKNOWN = 0
    INTEROP = 1
    SMPTE = 2


class EssenceType(enum.IntEnum):
    """Essence types reported by an essence inspector."""

    UNKNOWN = 0
    MPEG2_VES = 1
    JPEG_2000 = 2
    PCM_24B_48K = 3
    PCM_24B_96K = 4
    TIMED_TEXT = 5
    JPEG_2000_S = 6
    DCDATA_UNKNOWN = 7
    DCDATA_DOLBY_ATMOS = 8


class AssetClass(enum.IntEnum):
    """Track class an essence type belongs to."""

    UNKNOWN = 0
    PICTURE = 1
    SOUND = 2
    TIMED_TEXT = 3


class RatingAgency(enum.IntEnum):
    """Rating authorities with a registered agency URI."""

    NONE = 0
    MPAA = 1
    RCQ = 2


XML_HEADER = '<?xml version="1.0" encoding="UTF-8" standalone="no"?>'

# ---------------------------------------------------------------------------
# Namespace URI tables, indexed by XmlNamespace
# ---------------------------------------------------------------------------

NS_CPL: tuple[str, ...] = (
    "none",
    "http://www.digicine.com/PROTO-ASDCP-CPL-20040511#",
    "http://www.smpte-ra.org/schemas/429-7/2006/CPL",
)

NS_CPL_3D: tuple[str, ...] = (
    "none",
    "http://www.digicine.com/schemas/437-Y/2007/Main-Stereo-Picture-CPL",
    "http://www.smpte-ra.org/schemas/429-10/2008/Main-Stereo-Picture-CPL",
)

NS_PKL: tuple[str, ...] = (
    "none",
    "http://www.digicine.com/PROTO-ASDCP-PKL-20040311#",
    "http://www.smpte-ra.org/schemas/429-8/2007/PKL",
)

NS_AM: tuple[str, ...] = (
    "none",
    "http://www.digicine.com/PROTO-ASDCP-AM-20040311#",
    "http://www.smpte-ra.org/schemas/429-9/2007/AM",
)

# ---------------------------------------------------------------------------
# XML digital signature constants
# ---------------------------------------------------------------------------

DS_DSIG = "http://www.w3.org/2000/09/xmldsig#"
DS_CMA = "http://www.w3.org/TR/2001/REC-xml-c14n-20010315"
DS_DMA = "http://www.w3.org/2000/09/xmldsig#sha1"
DS_TMA = "http://www.w3.org/2000/09/xmldsig#enveloped-signature"

DS_SMA: tuple[str, ...] = (
    "none",
    "http://www.w3.org/2000/09/xmldsig#rsa-sha1",
    "http://www.w3.org/2001/04/xmldsig-more#rsa-sha256",
)

RATING_AGENCY: tuple[str, ...] = (
    "none",
    "http://www.mpaa.org/2003-ratings",
    "http://rcq.qc.ca/2003-ratings",
)


def cpl_namespace_uri(namespace: XmlNamespace, stereoscopic: bool = False) -> str:
    """Return the CPL schema URI, picking the stereo table for 3D pictures."""
    table = NS_CPL_3D if stereoscopic else NS_CPL
    return table[namespace]


def signature_method_uri(namespace: XmlNamespace) -> str:
    """Return the XML-DSig signature method URI for a dialect."""
    return DS_SMA[namespace]
