from itemservice.schemas.item import Item


def make_item(item_name: str | None = "Book", price: int | None = 2000, quantity: int | None = 10) -> Item:
    """Defaults describe a fully valid item (total 20000)."""
    return Item(item_name=item_name, price=price, quantity=quantity)


def summarize(errors) -> list[tuple]:
    """(field, code, args) triples, in order."""
    return [(e.field, e.code, e.args) for e in errors]
