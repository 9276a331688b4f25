"""DCP Packager: digital cinema package manifest assembly and validation.

WHY: A Digital Cinema Package is a tree of manifests (PKL → CPL → Reel →
Asset) that must satisfy strict structural rules before it can be
serialized to XML and signed. Catching those violations while the tree is
assembled is far cheaper than discovering them on a cinema server.

HOW: Three-stage pipeline: ingest (essence metadata via an inspector),
assemble (core IR with reel validation and aggregation), hand off
(pluggable formatters that export the finished tree). Each stage is
independently testable.

RULES:
- The PackageContext is passed explicitly through every call
- All formatters consume the same PackageContext tree
- Every failure is a DcpError subclass carrying an ErrorCode
"""

__version__ = "0.1.0"
