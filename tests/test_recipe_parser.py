"""Unit tests for ingredient and recipe parsing."""

import logging

import pytest

from grocerylist.ingest.recipe_parser import (
    EmptyDocumentError,
    Ingredient,
    MalformedIngredientLineError,
    RecipeError,
    UnreadableFileError,
    load_recipe,
    normalize_ingredient_name,
    parse_ingredient_line,
    parse_recipe,
    parse_servings,
    read_recipe_file,
)
from grocerylist.logging_config import TRACE
from grocerylist.normalize.parsing import InvalidNumberError, ZeroAmountError
from grocerylist.normalize.quantity import Custom, Pieces, Volume, Weight
from grocerylist.normalize.units import VolumeUnit, WeightUnit


class TestParseIngredientLine:
    """Tests for parse_ingredient_line."""

    def test_parse_single_ingredient(self):
        """Test a plain name and quantity."""
        ingredient = parse_ingredient_line("milk, 2 l")
        assert ingredient.name == "milk"
        assert ingredient.amount == Volume(2, VolumeUnit.LITER)

    def test_parse_with_dash_and_whitespace(self):
        """Test that the list bullet is stripped."""
        ingredient = parse_ingredient_line(" - milk, 2 l")
        assert ingredient == Ingredient("milk", Volume(2, VolumeUnit.LITER))

    def test_parse_with_star_bullet(self):
        """Test a star bullet and upper-case name."""
        assert parse_ingredient_line("* Chopped Tomatoes, 2 cans") == Ingredient(
            "chopped tomatoes", Custom(2, "cans")
        )

    def test_no_quantity_is_one_piece(self):
        """Test a line without a comma."""
        assert parse_ingredient_line("- Lemon") == Ingredient("lemon", Pieces(1))

    def test_empty_quantity_is_one_piece(self):
        """Test a trailing comma."""
        assert parse_ingredient_line("- lemon, ") == Ingredient("lemon", Pieces(1))

    def test_weight(self):
        """Test a weight quantity."""
        assert parse_ingredient_line("- Butter, 25 g").amount == Weight(25, WeightUnit.GRAM)

    def test_too_many_commas(self):
        """Test that more than one comma is malformed."""
        with pytest.raises(MalformedIngredientLineError) as exc_info:
            parse_ingredient_line("- butter, 2 tbsp, melted")
        assert exc_info.value.line == "- butter, 2 tbsp, melted"
        assert isinstance(exc_info.value, RecipeError)

    def test_missing_name(self):
        """Test that an empty name is malformed."""
        with pytest.raises(MalformedIngredientLineError):
            parse_ingredient_line("- , 2 dl")

    def test_invalid_quantity(self):
        """Test that quantity errors propagate."""
        with pytest.raises(ZeroAmountError):
            parse_ingredient_line("- milk, 0 dl")
        with pytest.raises(InvalidNumberError):
            parse_ingredient_line("- milk, some")

    def test_display(self):
        """Test string formatting."""
        assert str(parse_ingredient_line("- milk, 5 dl")) == "milk, 5 dl"
        assert str(parse_ingredient_line("- eggs, 3")) == "eggs, 3"


class TestIngredientAddition:
    """Tests for adding ingredients."""

    def test_add_same_name(self):
        """Test adding amounts of the same ingredient."""
        total = Ingredient("eggs", Pieces(2)) + Ingredient("eggs", Pieces(3))
        assert total == Ingredient("eggs", Pieces(5))

    def test_add_different_names(self):
        """Test that different ingredients cannot be added."""
        with pytest.raises(ValueError):
            Ingredient("eggs", Pieces(2)) + Ingredient("milk", Pieces(3))


class TestNormalizeIngredientName:
    """Tests for normalize_ingredient_name."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("Milk", "milk"),
            ("  - Milk  ", "milk"),
            ("* Brown Sugar", "brown sugar"),
            ("sugar-free syrup", "sugar-free syrup"),
        ],
    )
    def test_normalize(self, raw, expected):
        """Test bullet stripping, trimming and lower-casing."""
        assert normalize_ingredient_name(raw) == expected


class TestParseRecipe:
    """Tests for parse_recipe."""

    def test_parse_document(self, pancakes_text):
        """Test title, servings and ingredients."""
        recipe = parse_recipe(pancakes_text, source="pancakes.md")

        assert recipe.title == "Pancakes"
        assert recipe.declared_servings == 4
        assert recipe.source == "pancakes.md"
        assert [i.name for i in recipe.ingredients] == ["milk", "eggs", "salt"]
        assert recipe.ingredients[2].amount == Volume(1, VolumeUnit.SPICES)
        assert recipe.size == 3

    def test_bad_lines_are_logged(self, pancakes_text, caplog):
        """Test that invalid ingredient lines are skipped with a warning."""
        caplog.set_level(logging.WARNING, logger="grocerylist.ingest.recipe_parser")
        parse_recipe(pancakes_text, source="pancakes.md")

        assert "2.5" in caplog.text
        assert "melted" in caplog.text

    def test_ingredients_traced(self, pancakes_text, caplog):
        """Test that each kept ingredient is logged at trace level."""
        caplog.set_level(TRACE, logger="grocerylist.ingest.recipe_parser")
        parse_recipe(pancakes_text)

        traced = [r.getMessage() for r in caplog.records if r.levelno == TRACE]
        assert traced == ["Line 8: milk, 6 dl", "Line 10: eggs, 3", "Line 11: salt, 1 krm"]

    def test_plain_title(self):
        """Test a title without markdown heading marks."""
        recipe = parse_recipe("Omelette\n- eggs, 2\n")
        assert recipe.title == "Omelette"
        assert recipe.declared_servings is None
        assert str(recipe) == "Omelette"

    def test_bullet_title_is_not_an_ingredient(self):
        """Test that a list item used as the title is not counted twice."""
        recipe = parse_recipe("\n- milk, 1 l\n- eggs, 2\n")
        assert recipe.title == "- milk, 1 l"
        assert recipe.ingredients == [Ingredient("eggs", Pieces(2))]

    def test_servings_in_title_are_ignored(self):
        """Test that the title line does not declare servings."""
        assert parse_recipe("Servings: 4 soup\n- water, 1 l").declared_servings is None

    def test_swedish_servings(self):
        """Test the Swedish servings label."""
        assert parse_recipe("Pannkakor\nPortioner: 6\n- mjölk, 6 dl").declared_servings == 6

    def test_bullet_needs_space(self):
        """Test that lines like '-5 degrees' are not ingredients."""
        assert parse_recipe("Ice\n-5 degrees\n- water, 1 l").size == 1

    @pytest.mark.parametrize("text", ["", "\n\n  \n", "#\n- milk, 1 l"])
    def test_empty_document(self, text):
        """Test that a document without a title fails."""
        with pytest.raises(EmptyDocumentError):
            parse_recipe(text)


class TestParseServings:
    """Tests for parse_servings."""

    def test_servings_line(self):
        """Test finding a serving count."""
        assert parse_servings("Servings: 4") == 4
        assert parse_servings("*servings:2*") == 2

    def test_other_line(self):
        """Test lines without servings."""
        assert parse_servings("- milk, 2 l") is None
        assert parse_servings("Servings: many") is None


class TestReadRecipeFile:
    """Tests for reading recipe files."""

    def test_read_file(self, tmp_path):
        """Test reading a UTF-8 file."""
        path = tmp_path / "gravlax.md"
        path.write_text("# Gravlax\n- dill, 1 knippe\n- salt, 2 msk\n", encoding="utf-8")

        recipe = read_recipe_file(path)
        assert recipe.title == "Gravlax"
        assert recipe.ingredients[0].amount == Custom(1, "knippe")
        assert recipe.source == str(path)

    def test_missing_file(self, tmp_path):
        """Test that a missing file is unreadable."""
        with pytest.raises(UnreadableFileError):
            read_recipe_file(tmp_path / "missing.md")

    def test_invalid_encoding(self, tmp_path):
        """Test that non UTF-8 content is unreadable."""
        path = tmp_path / "latin1.txt"
        path.write_bytes("Köttbullar\n- lök, 1".encode("latin-1"))
        with pytest.raises(UnreadableFileError):
            read_recipe_file(path)

    def test_load_recipe_skips_failures(self, tmp_path):
        """Test that load_recipe returns None instead of raising."""
        empty = tmp_path / "empty.md"
        empty.write_text("", encoding="utf-8")

        assert load_recipe(empty) is None
        assert load_recipe(tmp_path / "missing.md") is None
