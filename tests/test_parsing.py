"""Unit tests for ingredient line parsing."""

import pytest

from recipebook.normalize.parsing import (
    ParsedIngredient,
    normalize_fractions,
    parse_ingredient,
    parse_ingredients,
    parse_number,
)


class TestNormalizeFractions:
    """Tests for normalize_fractions function."""

    def test_mixed_glyph(self):
        """Test a glyph after a whole number becomes a second token."""
        assert normalize_fractions("1½") == "1 0.5"

    def test_lone_glyph(self):
        """Test a standalone glyph."""
        assert normalize_fractions("¼ tsp").strip() == "0.25 tsp"

    def test_no_glyph(self):
        """Test text without fraction glyphs is unchanged."""
        assert normalize_fractions("2 cups flour") == "2 cups flour"


class TestParseNumber:
    """Tests for parse_number function."""

    def test_parse_integer(self):
        assert parse_number("2") == 2.0
        assert parse_number(" 10 ") == 10.0

    def test_parse_decimal(self):
        assert parse_number("1.5") == 1.5

    def test_parse_fraction(self):
        assert parse_number("3/4") == 0.75

    def test_parse_mixed_number(self):
        """Test two whitespace-separated numbers are summed."""
        assert parse_number("1 0.5") == 1.5
        assert parse_number("1 1/2") == 1.5

    def test_zero_denominator(self):
        assert parse_number("1/0") is None

    def test_unparsable(self):
        assert parse_number("") is None
        assert parse_number("1.2.3") is None
        assert parse_number("1 2 3") is None


class TestParseIngredient:
    """Tests for parse_ingredient function."""

    def test_unicode_fraction_with_notes(self):
        """Test the full pipeline on a typical scraped line."""
        result = parse_ingredient("1½ tbsp olive oil, plus extra")
        assert result == ParsedIngredient(
            quantity=1.5, unit="tbsp", name="olive oil", notes="plus extra"
        )

    def test_range_keeps_lower_bound(self):
        """Test ranges collapse to the first value and size words are dropped."""
        result = parse_ingredient("2-3 large carrots, peeled")
        assert result.quantity == 2
        assert result.unit is None
        assert result.name == "carrots"
        assert result.notes == "peeled"

    def test_en_dash_range(self):
        result = parse_ingredient("2–3 cloves garlic")
        assert result.quantity == 2
        assert result.unit == "cloves"
        assert result.name == "garlic"

    def test_qualitative_amount(self):
        """Test a pinch has no quantity and keeps the ingredient name."""
        result = parse_ingredient("a pinch of salt")
        assert result.quantity is None
        assert result.unit is None
        assert result.name == "salt"

    def test_bare_qualitative_amount_is_a_unit(self):
        """Test an amount word without an article is read as the unit."""
        result = parse_ingredient("pinch of salt")
        assert result.quantity is None
        assert result.unit == "pinch"
        assert result.name == "salt"

    def test_longest_unit_wins(self):
        """Test tbsp is never mis-tokenized as tsp."""
        assert parse_ingredient("1 tbsp sugar").unit == "tbsp"
        assert parse_ingredient("1 tsp sugar").unit == "tsp"
        assert parse_ingredient("2 teaspoons vanilla extract").unit == "teaspoons"
        assert parse_ingredient("1 tablespoon honey").unit == "tablespoon"
        assert parse_ingredient("1 fl oz whisky").unit == "fl oz"

    def test_unit_is_lowercase(self):
        result = parse_ingredient("1 TBSP Butter")
        assert result.unit == "tbsp"
        assert result.name == "Butter"

    def test_glued_unit(self):
        result = parse_ingredient("500g plain flour")
        assert result.quantity == 500
        assert result.unit == "g"
        assert result.name == "plain flour"

    def test_strip_of(self):
        result = parse_ingredient("100ml of milk")
        assert result.quantity == 100
        assert result.unit == "ml"
        assert result.name == "milk"

    def test_unitless_count(self):
        result = parse_ingredient("3 eggs")
        assert result.quantity == 3
        assert result.unit is None
        assert result.name == "eggs"

    def test_unit_prefix_needs_word_boundary(self):
        """Test short units do not swallow the start of a word."""
        result = parse_ingredient("2 garlic cloves")
        assert result.unit is None
        assert result.name == "garlic cloves"

        result = parse_ingredient("1 lemon")
        assert result.unit is None
        assert result.name == "lemon"

    def test_size_word_needs_whitespace(self):
        assert parse_ingredient("1 medium-sized onion").name == "medium-sized onion"
        assert parse_ingredient("2 Small shallots").name == "shallots"

    def test_fraction_quantity(self):
        result = parse_ingredient("1/2 tsp salt")
        assert result.quantity == 0.5
        assert result.unit == "tsp"

    def test_mixed_ascii_fraction(self):
        result = parse_ingredient("1 1/2 cups milk")
        assert result.quantity == 1.5
        assert result.unit == "cups"
        assert result.name == "milk"

    def test_unparsable_number_stays_in_name(self):
        result = parse_ingredient("1/0 cup sugar")
        assert result.quantity is None
        assert result.name == "1/0 cup sugar"

    def test_notes_split_on_first_comma(self):
        result = parse_ingredient("200 g butter, softened, cubed")
        assert result.name == "butter"
        assert result.notes == "softened, cubed"

    def test_trailing_comma_has_no_notes(self):
        result = parse_ingredient("Chicken stock,")
        assert result.name == "Chicken stock"
        assert result.notes is None

    def test_no_quantity_with_notes(self):
        result = parse_ingredient("salt, to taste")
        assert result.quantity is None
        assert result.name == "salt"
        assert result.notes == "to taste"

    def test_fallback_to_raw_text(self):
        """Test a line with nothing left for the name is kept whole."""
        result = parse_ingredient("  2 tbsp ")
        assert result == ParsedIngredient(quantity=None, unit=None, name="2 tbsp", notes=None)

    def test_empty_input(self):
        assert parse_ingredient("").name == ""
        assert parse_ingredient("   ").name == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "to taste",
            "1½",
            "-",
            ",",
            "of",
            "a handful",
            "1/2/3",
            "2 x 400g tins",
            "½ bunch coriander, leaves picked",
        ],
    )
    def test_name_never_empty(self, raw):
        """Test every non-blank line produces a name and no negative quantity."""
        result = parse_ingredient(raw)
        assert result.name
        assert result.quantity is None or result.quantity >= 0


class TestParseIngredients:
    """Tests for parse_ingredients function."""

    def test_sort_order_skips_blank_lines(self, raw_ingredient_lines):
        rows = parse_ingredients(raw_ingredient_lines)

        assert len(rows) == 5
        assert [row.sort_order for row in rows] == [0, 1, 2, 3, 4]
        assert rows[0].name == "olive oil"
        assert rows[2].quantity == 400
        assert rows[2].unit == "g"
        assert rows[4].name == "eggs"
