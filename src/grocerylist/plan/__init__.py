"""Recipe selection, scaling and shopping list generation."""

from grocerylist.plan.scaler import apply_serving_size
from grocerylist.plan.selector import RecipeSelector, median, partition_by_median
from grocerylist.plan.shopping_list import (
    ShoppingItem,
    ShoppingList,
    ShoppingListGenerator,
    merge_ingredients,
)

__all__ = [
    "RecipeSelector",
    "ShoppingItem",
    "ShoppingList",
    "ShoppingListGenerator",
    "apply_serving_size",
    "median",
    "merge_ingredients",
    "partition_by_median",
]
