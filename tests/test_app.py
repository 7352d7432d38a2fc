from __future__ import annotations

import asyncio
from decimal import Decimal

from lunch_tray.lunch_tray_app import LunchTrayApp
from lunch_tray.models import ScreenId

from sample_menu import CHIPS, TACOS


def test_full_order_is_submitted_and_flow_returns_to_start(catalog):
    async def run() -> None:
        app = LunchTrayApp(catalog=catalog)
        async with app.run_test() as pilot:
            assert app.machine.current_screen is ScreenId.START_ORDER

            await pilot.press("enter")
            assert app.machine.current_screen is ScreenId.ENTREE_MENU

            await pilot.press("down", "space")
            assert app.machine.order.entree == TACOS

            await pilot.press("enter", "space")
            assert app.machine.current_screen is ScreenId.SIDE_DISH_MENU
            assert app.machine.order.side_dish == CHIPS

            await pilot.press("enter", "enter")
            assert app.machine.current_screen is ScreenId.CHECKOUT
            assert app.machine.total_price() == Decimal("4.75")
            assert app.sub_title == "Order Checkout"

            await pilot.press("enter")
            assert app.machine.current_screen is ScreenId.START_ORDER
            assert app.machine.order.is_empty()

    asyncio.run(run())


def test_cancel_discards_the_order(catalog):
    async def run() -> None:
        app = LunchTrayApp(catalog=catalog)
        async with app.run_test() as pilot:
            await pilot.press("enter", "space", "c")

            assert app.machine.current_screen is ScreenId.START_ORDER
            assert app.machine.order.is_empty()
            assert app.machine.total_price() == Decimal("0")

    asyncio.run(run())


def test_back_navigation_and_noop_on_empty_history(catalog):
    async def run() -> None:
        app = LunchTrayApp(catalog=catalog)
        async with app.run_test() as pilot:
            await pilot.press("b")
            assert app.machine.current_screen is ScreenId.START_ORDER

            await pilot.press("enter", "enter", "b")
            assert app.machine.current_screen is ScreenId.ENTREE_MENU
            assert app.machine.can_navigate_up()

            await pilot.press("b")
            assert app.machine.current_screen is ScreenId.START_ORDER
            assert not app.machine.can_navigate_up()

    asyncio.run(run())


def test_returning_to_a_menu_highlights_the_current_choice(catalog):
    async def run() -> None:
        app = LunchTrayApp(catalog=catalog)
        async with app.run_test() as pilot:
            await pilot.press("enter", "down", "space", "enter")
            assert app.cursor_index == 0

            await pilot.press("b")
            assert app.machine.current_screen is ScreenId.ENTREE_MENU
            assert app.cursor_index == 1

            await pilot.press("down")
            assert app.cursor_index == 0

    asyncio.run(run())


def test_app_uses_default_menu_when_no_catalog_given():
    app = LunchTrayApp()

    assert app.machine.catalog is app.catalog
    assert app.machine.current_screen is ScreenId.START_ORDER
