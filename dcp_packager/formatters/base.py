"""Abstract base formatter and output container.

WHY: Serializers and signers live outside the packager, but each of them
needs the assembled tree in some concrete form. This base class gives
every export the same interface so the CLI can run any of them
generically.

HOW: BaseFormatter is an ABC with two requirements: a ``name`` property
and a ``format()`` method. FormatterOutput is a plain dataclass that
bundles a file suffix with its content (string or bytes) and MIME type.

RULES:
- Subclasses MUST implement ``name`` (human-readable) and ``format()``
- ``format()`` returns a list, one item per output file
- ``suffix`` starts with a hyphen, e.g. ``"-manifest.json"``
- The caller is responsible for prepending the package stem
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from dcp_packager.core.ir import PackageContext


@dataclass
class FormatterOutput:
    """One output file produced by a formatter.

    Attributes:
        suffix: File suffix appended to the package stem,
                e.g. ``"-manifest.json"`` → ``"show1-manifest.json"``.
        content: The file content as a string or bytes.
        media_type: MIME type for the content, e.g. ``"application/json"``.
    """

    suffix: str
    content: str | bytes
    media_type: str


class BaseFormatter(ABC):
    """Abstract base for all package exports.

    To add a new export:
    1. Create a new file in formatters/
    2. Subclass BaseFormatter
    3. Implement format() and name
    4. Register in FORMATTERS dict in formatters/__init__.py
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'Manifest JSON'."""

    @abstractmethod
    def format(self, context: PackageContext) -> list[FormatterOutput]:
        """Convert the assembled package into one or more output files.

        Args:
            context: The package context holding the finished PKL tree.

        Returns:
            List of FormatterOutput objects.
        """
