"""Free-text ingredient line parsing."""

import re
from collections.abc import Iterable
from dataclasses import dataclass

from recipebook.logging_config import get_logger
from recipebook.normalize.units import UNITS_BY_LENGTH

logger = get_logger(__name__)


# Unicode vulgar fractions and their decimal values
UNICODE_FRACTIONS: dict[str, float] = {
    "½": 0.5,
    "¼": 0.25,
    "¾": 0.75,
    "⅓": 1 / 3,
    "⅔": 2 / 3,
    "⅛": 0.125,
    "⅜": 0.375,
    "⅝": 0.625,
    "⅞": 0.875,
}

# Size words that read as a count rather than a unit ("2 large carrots").
SIZE_QUALIFIERS: tuple[str, ...] = ("extra large", "large", "medium", "small")

# Amounts with no numeral ("a pinch of salt"); dropped so the name survives.
QUALITATIVE_AMOUNTS: tuple[str, ...] = (
    "pinch",
    "pinches",
    "handful",
    "handfuls",
    "dash",
    "splash",
    "drizzle",
    "knob",
    "sprinkle",
    "few",
)

_RANGE_RE = re.compile(r"^(\d[\d\s./]*?)\s*[-–]\s*\d[\d./]*")
_NUMBER_RUN_RE = re.compile(r"^[\d\s./]+")
_FRACTION_RE = re.compile(r"^(\d+)/(\d+)$")
_OF_RE = re.compile(r"^of\s+", re.IGNORECASE)
_SIZE_RE = re.compile(
    r"^(?:" + "|".join(re.escape(s) for s in SIZE_QUALIFIERS) + r")\s+",
    re.IGNORECASE,
)
_QUALITATIVE_RE = re.compile(
    r"^(?:an?\s+)?(?:"
    + "|".join(re.escape(a) for a in QUALITATIVE_AMOUNTS)
    + r")\s+(?:of\s+)?",
    re.IGNORECASE,
)
_UNIT_RES: tuple[tuple[str, re.Pattern[str]], ...] = tuple(
    (unit, re.compile(rf"^{re.escape(unit)}s?\b", re.IGNORECASE)) for unit in UNITS_BY_LENGTH
)


@dataclass(frozen=True)
class ParsedIngredient:
    """Structured view of one ingredient line."""

    quantity: float | None
    unit: str | None
    name: str
    notes: str | None = None


@dataclass(frozen=True)
class ScrapedIngredient:
    """A parsed ingredient with its position in the recipe."""

    quantity: float | None
    unit: str | None
    name: str
    notes: str | None
    sort_order: int

    @classmethod
    def from_parsed(cls, parsed: ParsedIngredient, sort_order: int) -> "ScrapedIngredient":
        return cls(
            quantity=parsed.quantity,
            unit=parsed.unit,
            name=parsed.name,
            notes=parsed.notes,
            sort_order=sort_order,
        )


def normalize_fractions(text: str) -> str:
    """Replace Unicode fraction glyphs with a space-prefixed decimal ("1½" -> "1 0.5")."""
    for char, value in UNICODE_FRACTIONS.items():
        if char in text:
            text = text.replace(char, f" {value}")
    return text


def _parse_part(part: str) -> float | None:
    frac_match = _FRACTION_RE.match(part)
    if frac_match:
        num, denom = int(frac_match.group(1)), int(frac_match.group(2))
        return num / denom if denom != 0 else None
    try:
        return float(part)
    except ValueError:
        return None


def parse_number(text: str) -> float | None:
    """
    Parse a leading numeric run into a quantity.

    Handles formats like:
    - "2"
    - "1.5"
    - "3/4"
    - "1 0.5" or "1 1/2" (mixed number, parts summed)

    Returns None for anything else, including a zero denominator.
    """
    text = text.strip()
    if not text:
        return None

    parts = text.split()
    if len(parts) == 2:
        whole = _parse_part(parts[0])
        fraction = _parse_part(parts[1])
        if whole is not None and fraction is not None:
            return whole + fraction
        return None

    if len(parts) != 1:
        return None
    return _parse_part(text)


def parse_ingredient(raw: str) -> ParsedIngredient:
    """
    Parse a raw ingredient line like '1½ tbsp olive oil, plus extra'.

    Never raises. When no name can be extracted the whole line, trimmed,
    becomes the name with every other field None.
    """
    text = normalize_fractions(raw).strip()

    # Ranges keep only their lower bound
    text = _RANGE_RE.sub(r"\1", text, count=1)

    quantity: float | None = None
    rest = text
    num_match = _NUMBER_RUN_RE.match(text)
    if num_match:
        quantity = parse_number(num_match.group(0))
        if quantity is not None:
            rest = text[num_match.end() :].strip()

    unit: str | None = None
    for candidate, pattern in _UNIT_RES:
        unit_match = pattern.match(rest)
        if unit_match:
            unit = candidate.lower()
            rest = rest[unit_match.end() :].strip()
            break

    if quantity is None and unit is None:
        rest = _QUALITATIVE_RE.sub("", rest, count=1)
    elif unit is None:
        rest = _SIZE_RE.sub("", rest, count=1)

    rest = _OF_RE.sub("", rest, count=1)

    name, _, notes = rest.partition(",")
    name = name.strip()
    notes = notes.strip() or None

    if not name:
        logger.debug(f"Falling back to raw text for ingredient line: {raw!r}")
        return ParsedIngredient(quantity=None, unit=None, name=raw.strip(), notes=None)

    return ParsedIngredient(quantity=quantity, unit=unit, name=name, notes=notes)


def parse_ingredients(lines: Iterable[str]) -> list[ScrapedIngredient]:
    """Parse raw lines into ordered rows, skipping blank lines."""
    rows: list[ScrapedIngredient] = []
    for line in lines:
        if not line or not line.strip():
            continue
        rows.append(ScrapedIngredient.from_parsed(parse_ingredient(line), len(rows)))
    return rows
