"""Command-line entry point for generating a shopping list from recipe files.

Run with: grocerylist recipes/ --limit 5
Simple mode: grocerylist recipes/ --simple
"""

import argparse
import random
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from grocerylist import __version__
from grocerylist.config import Settings, get_settings, weekly_seed
from grocerylist.debug import debug_info
from grocerylist.ingest.discovery import DiscoveryError, discover_recipe_files
from grocerylist.logging_config import LoggingContext, configure_logging, get_logger
from grocerylist.plan.selector import RecipeSelector
from grocerylist.plan.shopping_list import ShoppingList, ShoppingListGenerator
from grocerylist.schemas import ShoppingListRequest

logger = get_logger(__name__)


def non_negative_int(value: str) -> int:
    """argparse type for non-negative integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid digit: {value!r}") from None
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grocerylist",
        description="Application for generating shopping lists from recipes",
    )
    parser.add_argument(
        "paths",
        nargs="*",
        default=["."],
        metavar="PATH",
        help="Files or directories to look for recipes in (default: current directory)",
    )
    parser.add_argument(
        "--limit",
        "-l",
        type=non_negative_int,
        default=settings.default_limit,
        help="Limit how many recipes to use",
    )
    parser.add_argument(
        "--seed",
        "-S",
        type=non_negative_int,
        default=settings.seed,
        help="Seed for selecting recipes; changes automatically every week",
    )
    parser.add_argument(
        "--simple",
        "-s",
        action="store_true",
        help="Prefer recipes with fewer ingredients than the median",
    )
    parser.add_argument(
        "--servings",
        "-n",
        dest="serving_size",
        type=non_negative_int,
        default=settings.serving_size,
        help="Scale recipes that declare servings to this many servings",
    )
    parser.add_argument(
        "--verbosity",
        "-v",
        type=int,
        choices=range(6),
        default=settings.verbosity,
        help="Set verbosity level, 0 - 5",
    )
    parser.add_argument(
        "--debug",
        "-D",
        action="store_true",
        help="Print debug information about this build and exit",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def build_shopping_list(
    request: ShoppingListRequest,
    settings: Settings | None = None,
) -> ShoppingList:
    """
    Run the whole pipeline for one request.

    Raises:
        DiscoveryError: A given path is missing or not a recipe file.
    """
    settings = settings or get_settings()

    files = discover_recipe_files(
        request.paths,
        extensions=settings.extensions,
        ignored=settings.ignored,
    )
    logger.info(f"Found {len(files)} recipe files")

    rng = random.Random(request.seed)
    selector = RecipeSelector(limit=request.limit, simple=request.simple)
    recipes = selector.select(files, rng)

    generator = ShoppingListGenerator(serving_size=request.serving_size)
    return generator.generate(recipes)


def main(argv: Sequence[str] | None = None) -> int:
    try:
        settings = get_settings()
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid settings: {e}")
        return 2

    args = build_parser(settings).parse_args(argv)

    try:
        request = ShoppingListRequest(
            paths=args.paths,
            limit=args.limit,
            seed=args.seed if args.seed is not None else weekly_seed(),
            simple=args.simple,
            serving_size=args.serving_size,
            verbosity=args.verbosity,
        )
    except ValidationError as e:
        configure_logging()
        logger.error(f"Invalid arguments: {e}")
        return 2

    configure_logging(verbosity=request.verbosity)

    if args.debug:
        print(debug_info())
        return 0

    with LoggingContext(seed=request.seed):
        try:
            shopping_list = build_shopping_list(request, settings)
        except DiscoveryError as e:
            logger.error(str(e))
            return e.exit_code

    for line in shopping_list.lines():
        print(line)

    return 0


if __name__ == "__main__":
    sys.exit(main())
