"""Editable static menu configuration."""

from __future__ import annotations

# Prices are strings so data.py can build exact Decimal values from them.
MENU_ROWS_BY_CATEGORY: dict[str, list[dict[str, str]]] = {
    "entree": [
        {
            "item_id": "cauliflower",
            "name": "Cauliflower",
            "description": "Whole cauliflower, brined, roasted, and deep fried",
            "price": "7.00",
        },
        {
            "item_id": "three_bean_chili",
            "name": "Three Bean Chili",
            "description": "Black beans, red beans, kidney beans, slow cooked, topped with onion",
            "price": "4.00",
        },
        {
            "item_id": "mushroom_pasta",
            "name": "Mushroom Pasta",
            "description": "Penne pasta, mushrooms, basil, with cherry tomatoes cooked in garlic and olive oil",
            "price": "5.50",
        },
        {
            "item_id": "spicy_black_bean_skillet",
            "name": "Spicy Black Bean Skillet",
            "description": "Seasonal vegetables, black beans, house spice blend, served with avocado and quick pickled onions",
            "price": "5.50",
        },
    ],
    "side_dish": [
        {
            "item_id": "summer_salad",
            "name": "Summer Salad",
            "description": "Heirloom tomatoes, butter lettuce, peaches, avocado, balsamic dressing",
            "price": "2.50",
        },
        {
            "item_id": "butternut_squash_soup",
            "name": "Butternut Squash Soup",
            "description": "Roasted butternut squash, roasted peppers, chili oil",
            "price": "3.00",
        },
        {
            "item_id": "spicy_potatoes",
            "name": "Spicy Potatoes",
            "description": "Marble potatoes, roasted, and fried in house spice blend",
            "price": "2.00",
        },
        {
            "item_id": "coconut_rice",
            "name": "Coconut Rice",
            "description": "Rice, coconut milk, lime, and sugar",
            "price": "1.50",
        },
    ],
    "accompaniment": [
        {
            "item_id": "lunch_roll",
            "name": "Lunch Roll",
            "description": "Fresh baked roll made in house",
            "price": "0.50",
        },
        {
            "item_id": "mixed_berries",
            "name": "Mixed Berries",
            "description": "Strawberries, blueberries, raspberries, and huckleberries",
            "price": "1.00",
        },
        {
            "item_id": "pickled_veggies",
            "name": "Pickled Veggies",
            "description": "Pickled cucumbers and carrots, made in house",
            "price": "0.50",
        },
    ],
}
