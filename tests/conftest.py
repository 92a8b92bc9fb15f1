"""Pytest configuration and shared fixtures."""

import logging

import pytest

from grocerylist.config import get_settings
from grocerylist.ingest.recipe_parser import Recipe, parse_ingredient_line

# =============================================================================
# Environment Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo handler and level changes made by configure_logging."""
    root = logging.getLogger()
    package = logging.getLogger("grocerylist")
    handlers = root.handlers[:]
    root_level = root.level
    package_level = package.level

    yield

    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(root_level)
    package.setLevel(package_level)


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Keep GROCERYLIST_* variables from the environment out of the tests."""
    for name in ("SEED", "DEFAULT_LIMIT", "SERVING_SIZE", "VERBOSITY"):
        monkeypatch.delenv(f"GROCERYLIST_{name}", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def make_recipe():
    """Factory building a recipe from ingredient lines."""

    def _make(title: str, *lines: str, servings: int | None = None) -> Recipe:
        return Recipe(
            title=title,
            ingredients=[parse_ingredient_line(line) for line in lines],
            declared_servings=servings,
        )

    return _make


@pytest.fixture
def pancakes_text():
    """A markdown recipe with servings and a few odd lines."""
    return "\n".join(
        [
            "",
            "# Pancakes",
            "",
            "Servings: 4",
            "",
            "## Ingredients",
            "",
            "- Milk, 6 dl",
            "- wheat flour, 2.5 dl",
            "- eggs, 3",
            "- salt, 1 krm",
            "- butter, 2 tbsp, melted",
            "* not an ingredient",
            "",
            "Whisk everything together and fry.",
        ]
    )


@pytest.fixture
def recipe_dir(tmp_path):
    """A directory with three recipes, a README and a non-recipe file."""
    (tmp_path / "pancakes.md").write_text(
        "# Pancakes\nServings: 4\n\n- milk, 6 dl\n- eggs, 3\n- butter, 25 g\n",
        encoding="utf-8",
    )
    (tmp_path / "omelette.txt").write_text(
        "Omelette\nservings: 1\n- eggs, 2\n- butter, 10 g\n",
        encoding="utf-8",
    )
    nested = tmp_path / "dinner"
    nested.mkdir()
    (nested / "porridge.md").write_text(
        "# Porridge\n\n- oats, 1 dl\n- milk, 4 dl\n- salt, 1 krm\n",
        encoding="utf-8",
    )
    (tmp_path / "README.md").write_text("# My recipes\n- paper, 1\n", encoding="utf-8")
    (tmp_path / "notes.json").write_text("{}", encoding="utf-8")
    return tmp_path
