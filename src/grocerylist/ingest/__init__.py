"""Read recipe documents from disk."""

from grocerylist.ingest.discovery import (
    DiscoveryError,
    PathNotFoundError,
    UnsupportedExtensionError,
    discover_recipe_files,
)
from grocerylist.ingest.recipe_parser import (
    EmptyDocumentError,
    Ingredient,
    MalformedIngredientLineError,
    Recipe,
    RecipeError,
    UnreadableFileError,
    load_recipe,
    parse_ingredient_line,
    parse_recipe,
    read_recipe_file,
)

__all__ = [
    "DiscoveryError",
    "EmptyDocumentError",
    "Ingredient",
    "MalformedIngredientLineError",
    "PathNotFoundError",
    "Recipe",
    "RecipeError",
    "UnreadableFileError",
    "UnsupportedExtensionError",
    "discover_recipe_files",
    "load_recipe",
    "parse_ingredient_line",
    "parse_recipe",
    "read_recipe_file",
]
