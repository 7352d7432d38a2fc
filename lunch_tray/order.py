"""Order state machine: current screen, navigation history and selections."""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Callable

from lunch_tray.data import MenuCatalog
from lunch_tray.errors import CategoryMismatchError, UnknownScreenError
from lunch_tray.models import Category, MenuItem, OrderSnapshot, OrderState, ScreenId

logger = logging.getLogger(__name__)

OrderListener = Callable[[OrderSnapshot], None]


class OrderStateMachine:
    """Single source of truth for where the flow is and what was chosen.

    Transitions are unconditional: any screen may be navigated to from any
    other. Which transitions are offered is decided by the UI wiring.
    """

    def __init__(self, catalog: MenuCatalog) -> None:
        self.catalog = catalog
        self._order = OrderState()
        self._screen = ScreenId.START_ORDER
        self._history: list[ScreenId] = []
        self._listeners: list[OrderListener] = []

    @property
    def current_screen(self) -> ScreenId:
        return self._screen

    @property
    def order(self) -> OrderState:
        """A copy of the current order; mutating it does not affect the machine."""
        return replace(self._order)

    @property
    def history(self) -> tuple[ScreenId, ...]:
        return tuple(self._history)

    def select_item(self, category: Category, item: MenuItem) -> None:
        """Record item as the choice for category, replacing any earlier one."""
        if item.category is not category or not self.catalog.contains(category, item):
            raise CategoryMismatchError(f"{item.name!r} is not on the {category.value} menu")

        previous = self._order.get(category)
        self._order.set(category, item)
        logger.debug(
            "select_item category=%s name=%r replaced=%r",
            category.value,
            item.name,
            previous.name if previous is not None else None,
        )
        self._notify()

    def reset(self) -> None:
        """Discard all selections."""
        self._order.clear()
        logger.debug("reset screen=%s", self._screen.value)
        self._notify()

    def total_price(self) -> Decimal:
        return sum((item.price for item in self._order.selected_items()), Decimal("0"))

    def navigate_to(self, screen: ScreenId) -> None:
        if not isinstance(screen, ScreenId):
            raise UnknownScreenError(f"unknown screen: {screen!r}")

        self._history.append(self._screen)
        logger.debug("navigate_to from=%s to=%s depth=%d", self._screen.value, screen.value, len(self._history))
        self._screen = screen
        self._notify()

    def navigate_up(self) -> bool:
        """Return to the previous screen. Returns False when there is none."""
        if not self._history:
            logger.debug("navigate_up ignored screen=%s reason=empty_history", self._screen.value)
            return False

        previous = self._history.pop()
        logger.debug("navigate_up from=%s to=%s depth=%d", self._screen.value, previous.value, len(self._history))
        self._screen = previous
        self._notify()
        return True

    def can_navigate_up(self) -> bool:
        return bool(self._history)

    def snapshot(self) -> OrderSnapshot:
        return OrderSnapshot(
            screen=self._screen,
            order=self.order,
            history=self.history,
            total_price=self.total_price(),
            can_navigate_up=self.can_navigate_up(),
        )

    def subscribe(self, listener: OrderListener) -> Callable[[], None]:
        """Call listener with a snapshot after every state change.

        Returns a function that removes the listener again.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            listener(snapshot)
