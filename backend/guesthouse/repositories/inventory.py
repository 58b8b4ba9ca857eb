from guesthouse.models.inventory import InventoryItem
from guesthouse.repositories.base import Repository


class InventoryRepository(Repository):
    model = InventoryItem
    entity = "Item"
    fields = (
        "name",
        "category_id",
        "quantity",
        "unit",
        "cost_price",
        "selling_price",
        "reorder_level",
    )
    required = ("name", "category_id", "quantity", "cost_price", "selling_price")
    defaults = {"reorder_level": 0}

    @property
    def label(self) -> str:
        return "inventory item"
