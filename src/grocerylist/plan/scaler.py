"""Scale recipes to a requested number of servings."""

from dataclasses import replace
from fractions import Fraction

from grocerylist.ingest.recipe_parser import Ingredient, Recipe
from grocerylist.logging_config import get_logger

logger = get_logger(__name__)


def serving_ratio(declared: int, target: int) -> Fraction:
    """Ratio to multiply quantities by to go from declared to target servings."""
    if declared <= 0:
        raise ValueError(f"Declared servings must be positive, got {declared}")
    return Fraction(target, declared)


def apply_serving_size(recipe: Recipe, target: int | None) -> Recipe:
    """
    Scale every ingredient of a recipe to the target serving count.

    Recipes without declared servings, or already at the target, are
    returned as is. Scaled amounts never drop below 1.
    """
    declared = recipe.declared_servings
    if target is None or not declared or declared == target:
        return recipe

    ratio = serving_ratio(declared, target)
    logger.debug(f"Scaling {recipe.title!r} from {declared} to {target} servings")

    ingredients = [Ingredient(i.name, i.amount.scale(ratio)) for i in recipe.ingredients]
    return replace(recipe, ingredients=ingredients, declared_servings=target)
