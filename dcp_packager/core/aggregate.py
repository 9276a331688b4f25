"""Aggregation: compose reels into CPLs, CPLs into PKLs, PKLs into the package.

WHY: Each parent owns its children outright (no reel is shared between
playlists) and each parent holds a bounded number of children. Copying
on append and checking capacity here keeps both guarantees in one place.

RULES:
- The parent stores a deep copy; later changes to the child do not leak in
- Insertion order is serialization order
- A full parent raises CapacityExceededError and is left unchanged
"""

from __future__ import annotations

import copy
import logging

from dcp_packager.core.errors import CapacityExceededError
from dcp_packager.core.ir import Cpl, PackageContext, Pkl, Reel

logger = logging.getLogger(__name__)


def _check_capacity(current: int, capacity: int, child: str, parent: str) -> None:
    if current >= capacity:
        logger.error("Cannot add %s: %s already holds %d", child, parent, capacity)
        raise CapacityExceededError(
            "{} already holds the maximum of {} {}s".format(parent, capacity, child)
        )


def add_reel_to_cpl(cpl: Cpl, reel: Reel) -> None:
    """Append a copy of a validated reel to a CPL."""
    _check_capacity(cpl.reel_count, cpl.capacity, "reel", "CPL " + cpl.uuid)
    cpl.reels.append(copy.deepcopy(reel))


def add_cpl_to_pkl(pkl: Pkl, cpl: Cpl) -> None:
    """Append a copy of a CPL to a PKL."""
    _check_capacity(pkl.cpl_count, pkl.capacity, "CPL", "PKL " + pkl.uuid)
    pkl.cpls.append(copy.deepcopy(cpl))


def add_pkl_to_context(context: PackageContext, pkl: Pkl) -> None:
    """Append a copy of a PKL to the package."""
    _check_capacity(context.pkl_count, context.max_pkls, "PKL", "package")
    context.pkls.append(copy.deepcopy(pkl))
