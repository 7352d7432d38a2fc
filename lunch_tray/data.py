"""Menu catalog built from static data."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from lunch_tray.constant import MENU_ROWS_BY_CATEGORY
from lunch_tray.errors import InvalidCategoryError
from lunch_tray.models import Category, MenuItem


class MenuCatalog:
    """Read-only listing of the menu items offered per category."""

    def __init__(self, items_by_category: Mapping[Category, Iterable[MenuItem]]) -> None:
        self._items: dict[Category, list[MenuItem]] = {}
        for category in Category:
            if category not in items_by_category:
                raise ValueError(f"catalog is missing category {category.value!r}")
            items = list(items_by_category[category])
            if not items:
                raise ValueError(f"catalog category {category.value!r} is empty")

            seen_names: set[str] = set()
            for item in items:
                if item.category is not category:
                    raise ValueError(
                        f"{item.name!r} is a {item.category.value} item but was listed under {category.value}"
                    )
                if item.name in seen_names:
                    raise ValueError(f"duplicate {category.value} item {item.name!r}")
                seen_names.add(item.name)
            self._items[category] = items

    def categories(self) -> list[Category]:
        return list(self._items)

    def items_for(self, category: Category) -> list[MenuItem]:
        """Items offered for a category, in menu order."""
        try:
            items = self._items[category]
        except (KeyError, TypeError):
            raise InvalidCategoryError(f"unknown menu category: {category!r}") from None
        return list(items)

    def find(self, category: Category, name: str) -> MenuItem | None:
        """Look up an item by display name (case-insensitive)."""
        wanted = name.strip().lower()
        for item in self.items_for(category):
            if item.name.lower() == wanted:
                return item
        return None

    def contains(self, category: Category, item: MenuItem) -> bool:
        return item in self.items_for(category)


def menu_item_from_row(category: Category, row: Mapping[str, str]) -> MenuItem:
    """Wrap one editable constant row into a MenuItem."""
    return MenuItem(
        item_id=str(row["item_id"]),
        name=str(row["name"]),
        description=str(row.get("description", "")),
        price=Decimal(str(row["price"])),
        category=category,
    )


def default_catalog() -> MenuCatalog:
    """Build a fresh catalog holding the standard lunch menu."""
    return MenuCatalog(
        {
            Category(category_key): [menu_item_from_row(Category(category_key), row) for row in rows]
            for category_key, rows in MENU_ROWS_BY_CATEGORY.items()
        }
    )
