import pytest

from itemservice.core.errors import BindingErrors
from itemservice.core.item_validation import ItemValidator


@pytest.fixture()
def validator():
    return ItemValidator()


@pytest.fixture()
def errors():
    return BindingErrors(object_name="item")


@pytest.fixture()
def clean_env(monkeypatch):
    """
    Strip any ITEM_* / app settings from the process env so Settings()
    only sees what the test sets explicitly.
    """
    for key in (
        "LOG_LEVEL",
        "ITEM_MIN_PRICE",
        "ITEM_MAX_PRICE",
        "ITEM_MAX_QUANTITY",
        "ITEM_MIN_TOTAL_PRICE",
    ):
        monkeypatch.delenv(key, raising=False)
    yield monkeypatch
