"""Rendering helpers for screens, menu rows and the checkout summary."""

from __future__ import annotations

from decimal import Decimal

from rich.text import Text

from lunch_tray.config import CURRENCY_SYMBOL, PRICE_QUANTUM
from lunch_tray.models import Category, MenuItem, OrderState, ScreenId

SCREEN_TITLES: dict[ScreenId, str] = {
    ScreenId.START_ORDER: "Lunch Tray",
    ScreenId.ENTREE_MENU: "Choose Entree",
    ScreenId.SIDE_DISH_MENU: "Choose Side Dish",
    ScreenId.ACCOMPANIMENT_MENU: "Choose Accompaniment",
    ScreenId.CHECKOUT: "Order Checkout",
}

CATEGORY_LABELS: dict[Category, str] = {
    Category.ENTREE: "Entree",
    Category.SIDE_DISH: "Side",
    Category.ACCOMPANIMENT: "Extra",
}


def screen_title(screen: ScreenId) -> str:
    return SCREEN_TITLES[screen]


def format_price(amount: Decimal) -> str:
    """Format an amount as currency, e.g. Decimal('5.5') -> '$5.50'."""
    return f"{CURRENCY_SYMBOL}{amount.quantize(PRICE_QUANTUM):,.2f}"


def badge_style(category: Category) -> str:
    """Return a consistent badge style for category tags."""
    if category is Category.ENTREE:
        return "bold #ffffff on #b23a48"
    if category is Category.SIDE_DISH:
        return "bold #ffffff on #2f6db5"
    return "bold #0b1f0f on #5fbf72"


def format_menu_item(item: MenuItem, *, highlighted: bool = False, selected: bool = False) -> Text:
    """Render one selectable menu row with its description underneath."""
    text = Text()
    text.append("➤ " if highlighted else "  ")
    text.append("(•) " if selected else "( ) ")
    text.append(item.name, style="bold" if selected else "")
    text.append(f"  {format_price(item.price)}")
    text.append(f"\n      {item.description}", style="dim")
    return text


def format_subtotal(amount: Decimal) -> Text:
    text = Text()
    text.append("Subtotal: ", style="bold")
    text.append(format_price(amount))
    return text


def format_order_summary(order: OrderState, total: Decimal) -> Text:
    """Render the itemized checkout summary."""
    text = Text()
    text.append("Order Summary\n", style="bold")
    if order.is_empty():
        text.append("(nothing selected)\n", style="dim")
    for category in Category:
        item = order.get(category)
        if item is None:
            continue
        text.append(CATEGORY_LABELS[category], style=badge_style(category))
        text.append(f" {item.name}  {format_price(item.price)}\n")
    text.append("\n")
    text.append_text(format_subtotal(total))
    return text
