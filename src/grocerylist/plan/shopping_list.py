"""Shopping list generation from selected recipes."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from functools import reduce
from itertools import groupby
from operator import add

from grocerylist.ingest.recipe_parser import Ingredient, Recipe
from grocerylist.logging_config import get_logger
from grocerylist.normalize.quantity import Pieces, Quantity
from grocerylist.plan.scaler import apply_serving_size

logger = get_logger(__name__)


def merge_ingredients(ingredients: Iterable[Ingredient]) -> list[Ingredient]:
    """
    Combine ingredients with the same name by adding their amounts.

    The result is sorted by name. Amounts that cannot be added, such as a
    weight and a custom unit, keep the first amount seen for that name.
    """
    ordered = sorted(ingredients, key=lambda i: i.name)
    return [reduce(add, group) for _, group in groupby(ordered, key=lambda i: i.name)]


@dataclass
class ShoppingItem:
    """A single item in the shopping list."""

    name: str
    quantity: Quantity
    recipe_sources: list[str] = field(default_factory=list)

    def display(self) -> str:
        """Render as "<name>, <amount> <unit>"."""
        if isinstance(self.quantity, Pieces):
            return f"{self.name}, {self.quantity.amount}"
        return f"{self.name}, {self.quantity.amount} {self.quantity.unit_label}"


@dataclass
class ShoppingList:
    """Complete shopping list for a set of recipes."""

    items: list[ShoppingItem] = field(default_factory=list)
    recipe_titles: list[str] = field(default_factory=list)

    def add_item(self, item: ShoppingItem) -> None:
        self.items.append(item)

    def lines(self) -> list[str]:
        """One formatted line per item, in item order."""
        return [item.display() for item in self.items]

    def __len__(self) -> int:
        return len(self.items)


class ShoppingListGenerator:
    """
    Generates shopping lists from recipes with:
    - Serving-size scaling per recipe
    - Quantity aggregation across recipes
    - Unit re-expression (e.g., 5 dl + 1 l -> 15 dl)
    """

    def __init__(self, serving_size: int | None = None):
        self.serving_size = serving_size

    def generate(self, recipes: Iterable[Recipe]) -> ShoppingList:
        """
        Generate a shopping list from recipes.

        Args:
            recipes: The selected recipes.

        Returns:
            ShoppingList with one item per ingredient name.
        """
        scaled = [apply_serving_size(r, self.serving_size) for r in recipes]

        sources: dict[str, list[str]] = {}
        all_ingredients: list[Ingredient] = []
        for recipe in scaled:
            for ingredient in recipe.ingredients:
                titles = sources.setdefault(ingredient.name, [])
                if recipe.title not in titles:
                    titles.append(recipe.title)
                all_ingredients.append(ingredient)

        shopping_list = ShoppingList(recipe_titles=[r.title for r in scaled])
        for merged in merge_ingredients(all_ingredients):
            shopping_list.add_item(
                ShoppingItem(
                    name=merged.name,
                    quantity=merged.amount.readable(),
                    recipe_sources=sources[merged.name],
                )
            )

        logger.info(
            f"Generated shopping list: {len(shopping_list)} items "
            f"from {len(shopping_list.recipe_titles)} recipes"
        )

        return shopping_list
