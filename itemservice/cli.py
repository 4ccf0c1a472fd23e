import argparse
import sys

from itemservice.core.errors import BindingErrors
from itemservice.core.item_validation import get_item_validator
from itemservice.core.log_setup import configure_logging
from itemservice.core.validator import invoke_validator
from itemservice.schemas.item import Item
from itemservice.schemas.validation import ValidationResult


def main(argv: list[str] | None = None) -> int:
    """Validate one item from the command line and print the result as JSON."""
    parser = argparse.ArgumentParser(description="Validate an item form submission")
    parser.add_argument("--name", dest="item_name", default=None, help="Item name")
    parser.add_argument("--price", type=int, default=None, help="Unit price")
    parser.add_argument("--quantity", type=int, default=None, help="Quantity")
    parser.add_argument("--log-level", default=None, help="Overrides LOG_LEVEL (e.g. DEBUG)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    item = Item(item_name=args.item_name, price=args.price, quantity=args.quantity)
    errors = BindingErrors(object_name="item")
    invoke_validator(get_item_validator(), item, errors)

    result = ValidationResult.from_errors(errors)
    print(result.model_dump_json(indent=2))
    return 0 if result.valid else 1


if __name__ == "__main__":
    sys.exit(main())
