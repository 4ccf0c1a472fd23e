from __future__ import annotations

from itemservice.core.config import Settings, settings as default_settings
from itemservice.core.errors import BindingErrors
from itemservice.core.validator import Validator, invoke_validator
from itemservice.schemas.item import Item
from itemservice.schemas.validation import ValidationError

ITEM_MIN_PRICE = 1000
ITEM_MAX_PRICE = 1_000_000
ITEM_MAX_QUANTITY = 9999
ITEM_MIN_TOTAL_PRICE = 10_000

# str.isspace() is true for these, but they count as text in a submitted name
_NON_BLANK_SPACES = "\x85\xa0\u2007\u202f"


def has_text(value: str | None) -> bool:
    """True when value holds at least one character that is not blank."""
    if not value:
        return False
    return any(not c.isspace() or c in _NON_BLANK_SPACES for c in value)


class ItemValidator(Validator):
    """
    Field checks on itemName / price / quantity plus the price * quantity
    minimum. Every check runs; nothing short-circuits.

    Bounds:
      price     ITEM_MIN_PRICE <= price <= ITEM_MAX_PRICE
      quantity  quantity < ITEM_MAX_QUANTITY  (9999 itself is rejected)
      total     price * quantity >= ITEM_MIN_TOTAL_PRICE, only when both are set
    """

    supported_types = (Item,)

    def __init__(
        self,
        *,
        min_price: int = ITEM_MIN_PRICE,
        max_price: int = ITEM_MAX_PRICE,
        max_quantity: int = ITEM_MAX_QUANTITY,
        min_total_price: int = ITEM_MIN_TOTAL_PRICE,
    ):
        self.min_price = min_price
        self.max_price = max_price
        self.max_quantity = max_quantity
        self.min_total_price = min_total_price

    def validate(self, target: Item, errors: BindingErrors) -> None:
        self.check_supported(target)
        item = target

        if not has_text(item.item_name):
            errors.reject_value("itemName", "required", rejected_value=item.item_name)

        price = item.price
        if price is None or price < self.min_price or price > self.max_price:
            errors.reject_value(
                "price", "range", [self.min_price, self.max_price], rejected_value=price
            )

        quantity = item.quantity
        if quantity is None or quantity >= self.max_quantity:
            errors.reject_value(
                "quantity", "max", [self.max_quantity], rejected_value=quantity
            )

        # cross-field rule, not tied to a single field
        if price is not None and quantity is not None:
            total = price * quantity
            if total < self.min_total_price:
                errors.reject("totalPriceMin", [self.min_total_price, total])


def get_item_validator(settings: Settings | None = None) -> ItemValidator:
    s = settings or default_settings
    return ItemValidator(
        min_price=s.ITEM_MIN_PRICE,
        max_price=s.ITEM_MAX_PRICE,
        max_quantity=s.ITEM_MAX_QUANTITY,
        min_total_price=s.ITEM_MIN_TOTAL_PRICE,
    )


def validate_item(item: Item, validator: ItemValidator | None = None) -> list[ValidationError]:
    errors = BindingErrors(object_name="item")
    invoke_validator(validator or get_item_validator(), item, errors)
    return errors.all_errors
