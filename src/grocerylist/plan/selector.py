"""Recipe selection: seeded shuffle with optional complexity balancing."""

import random
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import TypeVar

from grocerylist.ingest.recipe_parser import Recipe, load_recipe
from grocerylist.logging_config import get_logger

logger = get_logger(__name__)

T = TypeVar("T")

RecipeLoader = Callable[[Path], Recipe | None]


def shuffled(items: Sequence[T], rng: random.Random) -> list[T]:
    """Return a shuffled copy of items, leaving the input untouched."""
    result = list(items)
    rng.shuffle(result)
    return result


def median(sizes: Sequence[int]) -> int:
    """
    Integer median of sizes.

    For an even number of values this is the truncated mean of the two
    middle values. An empty sequence has median 0.
    """
    if not sizes:
        return 0

    ordered = sorted(sizes)
    mid = len(ordered) // 2
    if len(ordered) % 2 == 0:
        return (ordered[mid - 1] + ordered[mid]) // 2
    return ordered[mid]


def partition_by_median(recipes: Sequence[Recipe]) -> list[Recipe]:
    """Order recipes at or under the median size before the larger ones."""
    cutoff = median([r.size for r in recipes])
    logger.debug(f"Will partition on median size: {cutoff}")

    under = [r for r in recipes if r.size <= cutoff]
    over = [r for r in recipes if r.size > cutoff]
    return under + over


class RecipeSelector:
    """
    Chooses which recipes go into the shopping list.

    Candidates are shuffled with the given random generator, so a fixed seed
    always gives the same selection. In simple mode every candidate is parsed
    and recipes with at most the median number of ingredients are preferred.
    """

    def __init__(
        self,
        limit: int,
        simple: bool = False,
        loader: RecipeLoader = load_recipe,
    ):
        self.limit = limit
        self.simple = simple
        self.loader = loader

    def select(self, paths: Sequence[Path], rng: random.Random) -> list[Recipe]:
        """
        Select up to limit recipes from paths.

        Files that cannot be read or parsed are skipped.
        """
        candidates = shuffled(paths, rng)

        if self.simple:
            selected = self._select_simple(candidates)
        else:
            selected = self._select_plain(candidates)

        for recipe in selected:
            logger.info(f"Selected {recipe.title} ({recipe.size} ingredients)")

        return selected

    def _load_all(self, paths: Sequence[Path]) -> list[Recipe]:
        recipes = []
        for path in paths:
            recipe = self.loader(path)
            if recipe is not None:
                recipes.append(recipe)
        return recipes

    def _select_simple(self, paths: Sequence[Path]) -> list[Recipe]:
        recipes = self._load_all(paths)
        for recipe in recipes:
            logger.debug(f"{recipe.title} => {recipe.size}")
        return partition_by_median(recipes)[: self.limit]

    def _select_plain(self, paths: Sequence[Path]) -> list[Recipe]:
        return self._load_all(paths[: self.limit])
