"""Parse recipe documents into recipes and ingredient lines."""

import re
from dataclasses import dataclass, field
from pathlib import Path

from grocerylist.logging_config import LoggingContext, get_logger
from grocerylist.normalize.parsing import QuantityParseError, parse_quantity
from grocerylist.normalize.quantity import Pieces, Quantity

logger = get_logger(__name__)

ITEM_PATTERN = re.compile(r"^\s*-\s+")
BULLET_PATTERN = re.compile(r"^\s*[-*]\s*")
SERVINGS_PATTERN = re.compile(r"\b(?:servings|portioner)\s*:\s*(\d+)", re.IGNORECASE)
HEADING_PATTERN = re.compile(r"^\s*#+\s*")


class RecipeError(Exception):
    """Base exception for recipe parsing errors."""

    def __init__(self, message: str, source: str | None = None):
        super().__init__(message)
        self.source = source


class MalformedIngredientLineError(RecipeError):
    """Raised when an ingredient line cannot be split into name and quantity."""

    def __init__(self, message: str, line: str):
        super().__init__(message)
        self.line = line


class UnreadableFileError(RecipeError):
    """Raised when a recipe file cannot be read as text."""


class EmptyDocumentError(RecipeError):
    """Raised when a recipe document has no title line."""


@dataclass(frozen=True)
class Ingredient:
    """An ingredient name with its amount."""

    name: str
    amount: Quantity

    def __add__(self, other: "Ingredient") -> "Ingredient":
        if self.name != other.name:
            raise ValueError(f"Cannot add {other.name} to {self.name}")
        return Ingredient(self.name, self.amount + other.amount)

    def __str__(self) -> str:
        return f"{self.name}, {self.amount}"


@dataclass
class Recipe:
    """A recipe parsed from one document."""

    title: str
    ingredients: list[Ingredient] = field(default_factory=list)
    declared_servings: int | None = None
    source: str | None = None

    @property
    def size(self) -> int:
        """Number of ingredients, used as a measure of complexity."""
        return len(self.ingredients)

    def __str__(self) -> str:
        return self.title


def normalize_ingredient_name(name: str) -> str:
    """Strip a list bullet and surrounding whitespace, then lower-case."""
    return BULLET_PATTERN.sub("", name, count=1).strip().lower()


def parse_ingredient_line(line: str) -> Ingredient:
    """
    Parse an ingredient line such as "- milk, 2 l".

    A line without a comma is one piece of the ingredient.

    Raises:
        MalformedIngredientLineError: More than one comma, or no name.
        QuantityParseError: The quantity after the comma is invalid.
    """
    parts = line.strip().split(",")
    if len(parts) > 2:
        raise MalformedIngredientLineError(f"Invalid line '{line}'", line=line)

    name = normalize_ingredient_name(parts[0])
    if not name:
        raise MalformedIngredientLineError(f"Missing ingredient name in '{line}'", line=line)

    amount = parse_quantity(parts[1]) if len(parts) == 2 else Pieces(1)
    return Ingredient(name, amount)


def parse_servings(line: str) -> int | None:
    """Return the serving count declared on a line, if any."""
    match = SERVINGS_PATTERN.search(line)
    if match:
        return int(match.group(1))
    return None


def parse_recipe(text: str, source: str | None = None) -> Recipe:
    """
    Parse a recipe document.

    The first non-empty line is the title and is never read as an
    ingredient. Lines starting with "- " are ingredients; invalid ingredient
    lines are logged and skipped.

    Raises:
        EmptyDocumentError: The document has no title.
    """
    lines = text.splitlines()
    title_number = next((n for n, line in enumerate(lines, start=1) if line.strip()), 0)
    title = HEADING_PATTERN.sub("", lines[title_number - 1]).strip() if title_number else ""
    if not title:
        raise EmptyDocumentError("Recipe has no title", source=source)

    recipe = Recipe(title=title, source=source)

    for number, line in enumerate(lines[title_number:], start=title_number + 1):
        servings = parse_servings(line)
        if servings is not None:
            recipe.declared_servings = servings
            continue

        if not ITEM_PATTERN.match(line):
            continue

        try:
            ingredient = parse_ingredient_line(line)
        except (MalformedIngredientLineError, QuantityParseError) as e:
            logger.warning(f"Skipping line {number} in {source or title!r}: {e}")
            continue

        logger.trace(f"Line {number}: {ingredient}")
        recipe.ingredients.append(ingredient)

    logger.debug(f"Parsed recipe {title!r} with {recipe.size} ingredients")
    return recipe


def read_recipe_file(path: str | Path) -> Recipe:
    """
    Read and parse a recipe file.

    Raises:
        UnreadableFileError: The file could not be read as UTF-8 text.
        EmptyDocumentError: The file has no title.
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise UnreadableFileError(f"Unable to read {path}: {e}", source=str(path)) from e

    return parse_recipe(text, source=str(path))


def load_recipe(path: str | Path) -> Recipe | None:
    """Read a recipe file, returning None if it cannot be used."""
    with LoggingContext(source=str(path)):
        try:
            return read_recipe_file(path)
        except RecipeError as e:
            logger.warning(f"Skipping recipe: {e}")
            return None
