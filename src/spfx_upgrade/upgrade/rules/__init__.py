"""Upgrade rule families and the built-in version catalogs.

``CATALOGS`` is the static table the registry loads: one entry per version
that a project can be upgraded *to*. The oldest supported version has no
catalog because nothing upgrades into it.
"""

from __future__ import annotations

from typing import Dict, List

from . import upgrade_1_5_0
from .base import Rule

CATALOGS: Dict[str, List[Rule]] = {
    upgrade_1_5_0.VERSION: upgrade_1_5_0.RULES,
}

__all__ = ["CATALOGS", "Rule"]
