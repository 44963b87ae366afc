"""Merge equivalent ingredient entries into one shopping list."""

import re
from collections.abc import Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from pyuca import Collator

from recipebook.logging_config import get_logger
from recipebook.normalize.units import UNIT_ALIASES

logger = get_logger(__name__)

_ARTICLE_RE = re.compile(r"^(a |an |some |the )", re.IGNORECASE)
_ONE_PLACE = Decimal("0.1")

# Unicode Collation Algorithm ordering, independent of the process locale
_collator = Collator()


@dataclass(frozen=True)
class IngredientEntry:
    """A quantity/unit/name row, already scaled by the caller."""

    name: str
    quantity: float | None
    unit: str | None


@dataclass
class ConsolidatedEntry:
    """One merged shopping-list line."""

    name: str
    unit: str | None
    quantity: float | None

    @property
    def key(self) -> str:
        """Consolidation key of this entry."""
        return consolidation_key(self.name, self.unit)

    def display_quantity(self) -> str:
        """Get human-readable quantity string."""
        return format_quantity(self.quantity, self.unit)


def normalize_name(name: str) -> str:
    """
    Normalize an ingredient name for grouping.

    Lowercases, trims, drops one leading article and one trailing "s".
    The singularization is naive: "tomatoes" becomes "tomatoe".
    """
    name = name.lower().strip()
    name = _ARTICLE_RE.sub("", name, count=1)
    if name.endswith("s"):
        name = name[:-1]
    return name


def normalize_unit(unit: str | None) -> str | None:
    """Lowercase a unit and collapse it to its canonical spelling."""
    if not unit:
        return None
    lower = unit.lower().strip()
    if not lower:
        return None
    return UNIT_ALIASES.get(lower, lower)


def consolidation_key(name: str, unit: str | None) -> str:
    """
    Key identifying entries that merge.

    Expects values that are already normalized, as stored on a consolidated
    entry or a persisted shopping-list row.
    """
    return f"{name}::{unit or ''}"


def entry_key(name: str, unit: str | None) -> str:
    """Normalize a raw name/unit pair and return its consolidation key."""
    return consolidation_key(normalize_name(name), normalize_unit(unit))


def consolidate_ingredients(entries: Iterable[IngredientEntry]) -> list[ConsolidatedEntry]:
    """
    Merge entries sharing a normalized (name, unit) pair.

    Quantities are summed and rounded to 3 decimals. If any entry in a group
    has no quantity the merged quantity is None. Different units of the same
    ingredient are never combined.

    Returns:
        Entries sorted by name in Unicode collation order, so accented names
        sort with their base letter.
    """
    merged: dict[str, ConsolidatedEntry] = {}

    for entry in entries:
        name = normalize_name(entry.name)
        unit = normalize_unit(entry.unit)
        key = consolidation_key(name, unit)

        existing = merged.get(key)
        if existing is None:
            merged[key] = ConsolidatedEntry(name=name, unit=unit, quantity=entry.quantity)
            continue

        if existing.quantity is not None and entry.quantity is not None:
            existing.quantity = round(existing.quantity + entry.quantity, 3)
        else:
            existing.quantity = None

    logger.debug(f"Consolidated entries into {len(merged)} lines")
    return sorted(merged.values(), key=lambda e: _collator.sort_key(e.name))


def format_quantity(quantity: float | None, unit: str | None) -> str:
    """
    Format a quantity and unit for display.

    Examples:
        (1.5, "tbsp") -> "1.5 tbsp"
        (2, "g") -> "2 g"
        (None, "g") -> ""
    """
    if quantity is None:
        return ""
    if quantity == int(quantity):
        text = str(int(quantity))
    else:
        # Ties round up, so 0.25 shows as 0.3
        rounded = Decimal(str(quantity)).quantize(_ONE_PLACE, rounding=ROUND_HALF_UP)
        text = str(rounded).removesuffix(".0")
    return f"{text} {unit}" if unit else text
