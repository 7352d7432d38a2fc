"""Domain models for lunch-tray."""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum


class Category(Enum):
    """A partition of the menu catalog."""

    ENTREE = "entree"
    SIDE_DISH = "side_dish"
    ACCOMPANIMENT = "accompaniment"


class ScreenId(Enum):
    """One of the five screens of the ordering flow."""

    START_ORDER = "start_order"
    ENTREE_MENU = "entree_menu"
    SIDE_DISH_MENU = "side_dish_menu"
    ACCOMPANIMENT_MENU = "accompaniment_menu"
    CHECKOUT = "checkout"


@dataclass(frozen=True)
class MenuItem:
    """A priced menu option belonging to exactly one category."""

    item_id: str
    name: str
    description: str
    price: Decimal
    category: Category

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"price must be >= 0 for {self.name!r}, got {self.price}")


_FIELD_BY_CATEGORY: dict[Category, str] = {
    Category.ENTREE: "entree",
    Category.SIDE_DISH: "side_dish",
    Category.ACCOMPANIMENT: "accompaniment",
}


@dataclass
class OrderState:
    """The in-progress selection, one optional item per category."""

    entree: MenuItem | None = None
    side_dish: MenuItem | None = None
    accompaniment: MenuItem | None = None

    def get(self, category: Category) -> MenuItem | None:
        return getattr(self, _FIELD_BY_CATEGORY[category])

    def set(self, category: Category, item: MenuItem | None) -> None:
        setattr(self, _FIELD_BY_CATEGORY[category], item)

    def clear(self) -> None:
        self.entree = None
        self.side_dish = None
        self.accompaniment = None

    def selected_items(self) -> list[MenuItem]:
        """Set items in flow order (entree, side dish, accompaniment)."""
        return [item for item in (self.entree, self.side_dish, self.accompaniment) if item is not None]

    def is_empty(self) -> bool:
        return not self.selected_items()


@dataclass(frozen=True)
class OrderSnapshot:
    """Observable state of an order flow after a mutating call."""

    screen: ScreenId
    order: OrderState
    history: tuple[ScreenId, ...]
    total_price: Decimal
    can_navigate_up: bool
