from __future__ import annotations

from dataclasses import fields, replace

from .config import Category, Config
from .errors import CategoryNotFound, DefaultCategoryNotFound

DEFAULT_CATEGORY = "default"


def merge_category(category: Category, default: Category) -> Category:
    """Return *category* with every empty field taken from *default*."""
    updates = {}
    for f in fields(Category):
        if f.name == "name":
            continue
        if not getattr(category, f.name):
            updates[f.name] = getattr(default, f.name)
    return replace(category, **updates)


def resolve_category(config: Config, name: str = DEFAULT_CATEGORY) -> Category:
    """Look up *name* and complete it from the ``default`` category.

    A config without a ``default`` table is unusable whatever the name, so
    DefaultCategoryNotFound wins over CategoryNotFound.
    """
    default = config.categories.get(DEFAULT_CATEGORY)
    if default is None:
        raise DefaultCategoryNotFound()

    category = config.categories.get(name)
    if category is None:
        raise CategoryNotFound(name)

    return merge_category(category, default)
