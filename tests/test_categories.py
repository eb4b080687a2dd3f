from datetime import datetime, timedelta, timezone

from analysis_service.formatting import format_amount, relative_time
from categories.categories import (
    CATEGORIES,
    DEFAULT_COLOR,
    DEFAULT_ICON,
    color_for,
    describe_categories,
    icon_for,
    is_known,
)


def test_known_categories_have_their_own_icon_and_color():
    assert icon_for("Dining Out") == "utensils"
    assert color_for("Rent") == "red"
    assert is_known("Groceries")


def test_unknown_category_falls_back_to_defaults():
    assert icon_for("Crypto") == DEFAULT_ICON
    assert color_for("Crypto") == DEFAULT_COLOR
    assert not is_known("Crypto")


def test_describe_categories_covers_fixed_list():
    described = describe_categories()
    assert [c["name"] for c in described] == CATEGORIES
    assert described[-1] == {"name": "Other", "icon": "piggy-bank", "color": "gray"}


def test_format_amount():
    assert format_amount(1234.5) == "₹1,234.50"
    assert format_amount(3, symbol="$") == "$3.00"


def test_relative_time():
    now = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)
    assert relative_time(now - timedelta(minutes=30), now=now) == "Just now"
    assert relative_time(now - timedelta(hours=5), now=now) == "5h ago"
    assert relative_time(now - timedelta(hours=30), now=now) == "Yesterday"
    assert relative_time(now - timedelta(days=3), now=now) == "2024-02-27"
    # future dates never read as "ago"
    assert relative_time(now + timedelta(hours=2), now=now) == "Just now"
