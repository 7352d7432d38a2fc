"""Main Textual app class."""

from __future__ import annotations

import logging

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.widgets import Header, Static

from lunch_tray.data import MenuCatalog, default_catalog
from lunch_tray.models import Category, MenuItem, OrderSnapshot, ScreenId
from lunch_tray.order import OrderStateMachine
from lunch_tray.rendering import (
    format_menu_item,
    format_order_summary,
    format_subtotal,
    screen_title,
)

logger = logging.getLogger(__name__)

# Screen the "Next" action leads to. The state machine itself accepts any
# transition; this is the canonical flow offered to the user.
NEXT_SCREEN: dict[ScreenId, ScreenId] = {
    ScreenId.START_ORDER: ScreenId.ENTREE_MENU,
    ScreenId.ENTREE_MENU: ScreenId.SIDE_DISH_MENU,
    ScreenId.SIDE_DISH_MENU: ScreenId.ACCOMPANIMENT_MENU,
    ScreenId.ACCOMPANIMENT_MENU: ScreenId.CHECKOUT,
}

CATEGORY_BY_SCREEN: dict[ScreenId, Category] = {
    ScreenId.ENTREE_MENU: Category.ENTREE,
    ScreenId.SIDE_DISH_MENU: Category.SIDE_DISH,
    ScreenId.ACCOMPANIMENT_MENU: Category.ACCOMPANIMENT,
}


class LunchTrayApp(App):
    """A Textual app that walks one lunch order from start to checkout."""

    TITLE = "Lunch Tray"

    CSS = """
    Screen {
        layout: vertical;
    }

    #flow-pane {
        height: 1fr;
        border: round $primary;
        padding: 1;
    }

    #screen-title {
        text-style: bold;
        margin-bottom: 1;
    }

    #body {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #subtotal {
        margin-top: 1;
    }

    #help {
        color: $text-muted;
    }
    """

    cursor_index = reactive(0)

    BINDINGS = [
        ("up", "move_cursor(-1)", "Previous"),
        ("down", "move_cursor(1)", "Next item"),
        ("k", "move_cursor(-1)", "Previous"),
        ("j", "move_cursor(1)", "Next item"),
        ("space", "select_current", "Select"),
        ("enter", "next", "Next"),
        ("n", "next", "Next"),
        ("c", "cancel", "Cancel"),
        ("escape", "navigate_up", "Back"),
        ("b", "navigate_up", "Back"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, catalog: MenuCatalog | None = None) -> None:
        super().__init__()
        self.catalog = catalog if catalog is not None else default_catalog()
        self.machine = OrderStateMachine(self.catalog)
        self.machine.subscribe(self._on_order_changed)
        logger.debug("app_init")

    def compose(self) -> ComposeResult:
        yield Header()
        with Vertical(id="flow-pane"):
            yield Static(id="screen-title")
            yield Static(id="body")
            yield Static(id="subtotal")
            yield Static(id="help")

    def on_mount(self) -> None:
        self._refresh_all()

    def action_move_cursor(self, delta: int) -> None:
        items = self._current_items()
        if not items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(items)
        self._refresh_body()

    def action_select_current(self) -> None:
        category = CATEGORY_BY_SCREEN.get(self.machine.current_screen)
        if category is None:
            return

        items = self.catalog.items_for(category)
        if not (0 <= self.cursor_index < len(items)):
            self.cursor_index = 0
        item = items[self.cursor_index]
        logger.debug("select_current screen=%s item=%r", self.machine.current_screen.value, item.name)
        self.machine.select_item(category, item)

    def action_next(self) -> None:
        screen = self.machine.current_screen
        if screen is ScreenId.CHECKOUT:
            logger.debug("submit total=%s items=%d", self.machine.total_price(), len(self.machine.order.selected_items()))
            self._start_over()
            return

        self.machine.navigate_to(NEXT_SCREEN[screen])

    def action_cancel(self) -> None:
        if self.machine.current_screen is ScreenId.START_ORDER:
            return
        logger.debug("cancel screen=%s", self.machine.current_screen.value)
        self._start_over()

    def action_navigate_up(self) -> None:
        if not self.machine.navigate_up():
            logger.debug("navigate_up blocked reason=no_history")

    def _start_over(self) -> None:
        self.machine.reset()
        self.machine.navigate_to(ScreenId.START_ORDER)

    def _on_order_changed(self, snapshot: OrderSnapshot) -> None:
        self.cursor_index = self._initial_cursor(snapshot)
        self._refresh_all()

    def _initial_cursor(self, snapshot: OrderSnapshot) -> int:
        category = CATEGORY_BY_SCREEN.get(snapshot.screen)
        if category is None:
            return 0
        selected = snapshot.order.get(category)
        items = self.catalog.items_for(category)
        if selected is None or selected not in items:
            return 0
        return items.index(selected)

    def _current_items(self) -> list[MenuItem]:
        category = CATEGORY_BY_SCREEN.get(self.machine.current_screen)
        if category is None:
            return []
        return self.catalog.items_for(category)

    def _refresh_all(self) -> None:
        self.sub_title = screen_title(self.machine.current_screen)
        self._refresh_screen_title()
        self._refresh_body()
        self._refresh_subtotal()
        self._refresh_help_line()

    def _refresh_screen_title(self) -> None:
        try:
            title_widget = self.query_one("#screen-title", Static)
        except NoMatches:
            return

        text = Text()
        if self.machine.can_navigate_up():
            text.append("← ", style="bold")
        text.append(screen_title(self.machine.current_screen))
        title_widget.update(text)

    def _refresh_body(self) -> None:
        try:
            body = self.query_one("#body", Static)
        except NoMatches:
            return

        screen = self.machine.current_screen
        if screen is ScreenId.START_ORDER:
            body.update("Press Enter to start a new order.")
            return

        if screen is ScreenId.CHECKOUT:
            order = self.machine.order
            body.update(format_order_summary(order, self.machine.total_price()))
            return

        category = CATEGORY_BY_SCREEN[screen]
        selected = self.machine.order.get(category)
        lines = Text()
        for idx, item in enumerate(self.catalog.items_for(category)):
            if idx > 0:
                lines.append("\n")
            lines.append_text(format_menu_item(item, highlighted=idx == self.cursor_index, selected=item == selected))
        body.update(lines)

    def _refresh_subtotal(self) -> None:
        try:
            subtotal = self.query_one("#subtotal", Static)
        except NoMatches:
            return

        if self.machine.current_screen in CATEGORY_BY_SCREEN:
            subtotal.update(format_subtotal(self.machine.total_price()))
        else:
            subtotal.update("")

    def _refresh_help_line(self) -> None:
        try:
            help_widget = self.query_one("#help", Static)
        except NoMatches:
            return

        screen = self.machine.current_screen
        back = "  Esc back." if self.machine.can_navigate_up() else ""
        if screen is ScreenId.START_ORDER:
            help_widget.update(f"Enter start order. Ctrl+Q quit.{back}")
        elif screen is ScreenId.CHECKOUT:
            help_widget.update(f"Enter submit. C cancel.{back}")
        else:
            help_widget.update(f"Up/Down move. Space select. Enter next. C cancel.{back}")
