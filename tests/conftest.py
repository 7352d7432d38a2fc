from __future__ import annotations

import pytest

from lunch_tray.data import MenuCatalog
from lunch_tray.models import Category

from sample_menu import BEANS, BURRITO, CHIPS, SALSA, TACOS


@pytest.fixture
def catalog() -> MenuCatalog:
    return MenuCatalog(
        {
            Category.ENTREE: [BURRITO, TACOS],
            Category.SIDE_DISH: [CHIPS, BEANS],
            Category.ACCOMPANIMENT: [SALSA],
        }
    )
