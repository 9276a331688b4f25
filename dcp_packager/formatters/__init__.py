"""Package export registry.

WHY: The CLI needs a single lookup to find an export by name. A central
dict makes it trivial to add new ones: create the formatter class,
import it here, add one line.

HOW: FORMATTERS maps string keys to formatter *classes* (not instances).
Callers instantiate as needed: ``formatter = FORMATTERS["manifest_json"]()``.

RULES:
- Keys are snake_case identifiers (used in the --formats CLI flag)
- Values are BaseFormatter subclasses (not instances)
- Every formatter listed here must be importable without side effects
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from dcp_packager.formatters.manifest_json import ManifestJsonFormatter
from dcp_packager.formatters.summary_text import SummaryTextFormatter

if TYPE_CHECKING:
    from dcp_packager.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "manifest_json": ManifestJsonFormatter,
    "summary_text": SummaryTextFormatter,
}
