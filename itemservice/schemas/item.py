from pydantic import BaseModel, ConfigDict, Field


class Item(BaseModel):
    """Submitted item form. Constraints are checked by ItemValidator, not here."""
    model_config = ConfigDict(populate_by_name=True)

    id: int | None = None
    item_name: str | None = Field(default=None, alias="itemName")
    price: int | None = None
    quantity: int | None = None
