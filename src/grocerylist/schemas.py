"""Request schema for a shopping list run."""

from pydantic import BaseModel, Field


class ShoppingListRequest(BaseModel):
    """Validated options for generating one shopping list."""

    paths: list[str] = Field(default_factory=lambda: ["."], min_length=1)
    limit: int = Field(7, ge=0, description="Max number of recipes to use")
    seed: int = Field(ge=0, description="Seed for the recipe shuffle")
    simple: bool = Field(False, description="Prefer recipes with few ingredients")
    serving_size: int | None = Field(None, ge=0, description="Scale recipes to this many servings")
    verbosity: int = Field(1, ge=0, le=5)
