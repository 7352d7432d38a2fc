"""Errors raised when the order flow is driven with invalid arguments.

These signal programming errors in the caller (the UI only ever offers
catalog items and known screens), so nothing in the package catches them.
"""

from __future__ import annotations


class LunchTrayError(Exception):
    """Base class for lunch_tray errors."""


class InvalidCategoryError(LunchTrayError, LookupError):
    """A category the catalog does not know was requested."""


class CategoryMismatchError(LunchTrayError, ValueError):
    """An item was selected under a category it does not belong to."""


class UnknownScreenError(LunchTrayError, ValueError):
    """Navigation was requested to something that is not a ScreenId."""
