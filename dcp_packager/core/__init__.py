"""Core assembly, validation, and intermediate representation modules.

WHY: The core package holds the domain rules of a DCP: how entities are
created and named, how assets are classified and slotted into reels, and
which conformance checks a reel must pass before it joins a playlist.

HOW: ir.py defines the data structures, factory.py creates them,
ingest.py turns files into assets, assembler.py and validator.py build
and check reels, aggregate.py composes reels into CPLs and CPLs into PKLs.

RULES:
- IR dataclasses are the contract; change with care
- No XML or signing logic here; formatters and external tools own that
- Errors are raised, never returned as sentinel values
"""
