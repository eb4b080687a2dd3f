from __future__ import annotations

from typing import Dict, List


# Fixed list offered by every form; the stores accept any string
CATEGORIES: List[str] = [
    "Dining Out",
    "Shopping",
    "Transportation",
    "Rent",
    "Utilities",
    "Entertainment",
    "Healthcare",
    "Groceries",
    "Other",
]

DEFAULT_ICON = "piggy-bank"
DEFAULT_COLOR = "gray"

_ICONS: Dict[str, str] = {
    "Dining Out": "utensils",
    "Shopping": "shopping-cart",
    "Transportation": "car",
    "Rent": "home",
    "Utilities": "home",
    "Entertainment": "coffee",
    "Healthcare": "heart",
    "Groceries": "shopping-cart",
    "Other": DEFAULT_ICON,
}

_COLORS: Dict[str, str] = {
    "Dining Out": "orange",
    "Shopping": "blue",
    "Transportation": "green",
    "Rent": "red",
    "Utilities": "purple",
    "Entertainment": "yellow",
    "Healthcare": "pink",
    "Groceries": "lime",
    "Other": DEFAULT_COLOR,
}


def is_known(category: str) -> bool:
    return category in _ICONS


def icon_for(category: str) -> str:
    """Icon name for a category; unknown categories get the default icon."""
    return _ICONS.get(category, DEFAULT_ICON)


def color_for(category: str) -> str:
    """Badge color for a category; unknown categories get the default color."""
    return _COLORS.get(category, DEFAULT_COLOR)


def describe_categories() -> List[Dict[str, str]]:
    return [{"name": name, "icon": icon_for(name), "color": color_for(name)} for name in CATEGORIES]
