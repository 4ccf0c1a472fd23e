import logging

import pytest
from pydantic import BaseModel

from itemservice.core.errors import BindingErrors
from itemservice.core.item_validation import ItemValidator
from itemservice.core.validator import UnsupportedTypeError, Validator, invoke_validator
from itemservice.schemas.item import Item
from tests.helpers import make_item


class Order(BaseModel):
    item_name: str | None = None
    price: int | None = None
    quantity: int | None = None


class SpecialItem(Item):
    pass


def test_item_validator_supports_item_types(validator):
    assert validator.supports(Item)
    assert validator.supports(SpecialItem)


def test_item_validator_rejects_other_types(validator):
    """Same shape is not enough; the type has to be declared"""
    assert not validator.supports(Order)
    assert not validator.supports(dict)
    assert not validator.supports("Item")


def test_invoke_validator_raises_for_unsupported_type(validator, errors):
    with pytest.raises(UnsupportedTypeError) as exc:
        invoke_validator(validator, Order(item_name="Book", price=2000, quantity=10), errors)
    assert exc.value.target_type is Order
    assert "ItemValidator" in str(exc.value)
    assert not errors.has_errors()


def test_direct_validate_also_checks_type(validator, errors):
    with pytest.raises(UnsupportedTypeError):
        validator.validate({"itemName": "Book", "price": 2000, "quantity": 10}, errors)


def test_unsupported_type_is_a_type_error(validator, errors):
    with pytest.raises(TypeError):
        invoke_validator(validator, None, errors)


def test_base_validator_cannot_be_instantiated():
    """validate() is abstract, so the error surfaces at construction"""
    with pytest.raises(TypeError):
        Validator()


def test_validator_without_supported_types_supports_nothing():
    class NoTypes(Validator):
        def validate(self, target, errors):
            errors.reject("unreachable")

    v = NoTypes()
    assert not v.supports(Item)
    errors = BindingErrors()
    with pytest.raises(UnsupportedTypeError):
        invoke_validator(v, make_item(), errors)
    assert not errors.has_errors()


def test_invoke_validator_logs_summary(validator, errors, caplog):
    caplog.set_level(logging.DEBUG, logger="itemservice.core.validator")
    invoke_validator(validator, make_item("", 1000, 5), errors)
    assert errors.error_count == 2
    assert "ItemValidator rejected item with 2 error(s)" in caplog.text
    assert "totalPriceMin" in caplog.text


def test_validators_are_stateless_across_targets():
    v = ItemValidator()
    bad, good = BindingErrors(), BindingErrors()
    invoke_validator(v, make_item("", 1, 1), bad)
    invoke_validator(v, make_item(), good)
    assert bad.error_count == 3
    assert good.error_count == 0
