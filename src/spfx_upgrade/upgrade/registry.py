"""Rule catalog registry for the spfx-upgrade system."""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Sequence

from spfx_upgrade.errors import RuleCatalogNotFoundError

if TYPE_CHECKING:
    from .rules.base import Rule


class RuleRegistry:
    """Registry of rule catalogs, keyed by the version they upgrade *to*."""

    _catalogs: Dict[str, List["Rule"]] = {}
    _defaults_loaded: bool = False

    @classmethod
    def register(cls, version: str, rules: Sequence["Rule"]) -> None:
        """Register the catalog of rules for upgrading to *version*.

        Args:
            version: Target version of the increment
            rules: Rule instances, in catalog order

        Raises:
            ValueError: If *version* is empty
        """
        if not version:
            raise ValueError("Rule catalogs must be registered against a version")
        cls._catalogs[version] = list(rules)

    @classmethod
    def load_defaults(cls) -> None:
        """Register the built-in catalogs without replacing explicit ones."""
        if cls._defaults_loaded:
            return
        # Imported lazily; catalog modules import the rule families.
        from .rules import CATALOGS

        for version, rules in CATALOGS.items():
            cls._catalogs.setdefault(version, list(rules))
        cls._defaults_loaded = True

    @classmethod
    def get_catalog(cls, version: str) -> List["Rule"]:
        """Get the rules for upgrading to *version*.

        Raises:
            RuleCatalogNotFoundError: If no catalog exists for *version*
        """
        cls.load_defaults()
        rules = cls._catalogs.get(version)
        if rules is None:
            raise RuleCatalogNotFoundError(version)
        return list(rules)

    @classmethod
    def versions(cls) -> List[str]:
        """Versions that have a registered catalog, in registration order."""
        cls.load_defaults()
        return list(cls._catalogs)

    @classmethod
    def clear(cls) -> None:
        """Clear all registered catalogs (for testing)."""
        cls._catalogs.clear()
        cls._defaults_loaded = False


__all__ = ["RuleRegistry"]
