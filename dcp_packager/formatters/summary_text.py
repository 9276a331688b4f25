"""Plain text package summary.

WHY: Before handing a package to the serializer, an operator wants a
quick look at what was assembled: which playlists, which reels, which
files, and how long each reel runs. No URIs, no schema, just the tree.

HOW: Walks PKLs → CPLs → reels and writes one indented line per entity,
with each occupied track slot listed under its reel.

RULES:
- Indent two spaces per tree level
- Reels numbered from 1
- Empty track slots are omitted
- Output suffix: "-summary.txt", media type "text/plain"
"""

from __future__ import annotations

from typing import List

from dcp_packager.core.ir import Asset, PackageContext
from dcp_packager.formatters.base import BaseFormatter, FormatterOutput

_SLOT_LABELS = (
    ("main_picture", "Picture"),
    ("main_sound", "Sound"),
    ("main_subtitle", "Subtitle"),
)


def _track_line(label: str, asset: Asset) -> str:
    line = "      {}: {} ({} frames".format(label, asset.annotation, asset.duration)
    if asset.entry_point:
        line += ", entry point {}".format(asset.entry_point)
    return line + ")"


class SummaryTextFormatter(BaseFormatter):
    """Formatter that lists the package tree as indented text."""

    @property
    def name(self) -> str:
        return "Summary Text"

    def format(self, context: PackageContext) -> List[FormatterOutput]:
        lines: List[str] = [
            "Package: {} ({})".format(context.title, context.namespace.name),
            "Issuer: {}".format(context.issuer),
            "Created: {}".format(context.timestamp),
        ]
        for pkl in context.pkls:
            lines.append("PKL {}".format(pkl.filename))
            for cpl in pkl.cpls:
                lines.append("  CPL {} [{}] {} reel(s)".format(
                    cpl.filename, cpl.kind, cpl.reel_count,
                ))
                for number, reel in enumerate(cpl.reels, start=1):
                    lines.append("    Reel {} {}".format(number, reel.uuid))
                    for slot, label in _SLOT_LABELS:
                        asset = getattr(reel, slot)
                        if asset is not None:
                            lines.append(_track_line(label, asset))

        return [
            FormatterOutput(
                suffix="-summary.txt",
                content="\n".join(lines) + "\n",
                media_type="text/plain",
            )
        ]
