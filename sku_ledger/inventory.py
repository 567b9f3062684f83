import logging
from typing import Iterable

from . import settings
from .item_record import ItemRecord
from .schemas import ItemSummary, Transaction

logger = logging.getLogger(__name__)


def format_amount(value: float) -> str:
    """Renders a dollar amount in its shortest general form, e.g. 8, 2.5, -1.25."""
    return f"{value:g}"


class Inventory:
    """
    Keeps one ItemRecord per SKU for every product received and sold in a store.

    Sale requests are checked against the stock on hand before they reach the
    record: a request for an unknown or empty SKU is rejected, and a request
    for more than is available is reduced to what is in stock. Both cases are
    reported as warnings and never raised to the caller.
    """

    def __init__(self, allow_oversell: bool | None = None):
        if allow_oversell is None:
            allow_oversell = settings.ALLOW_OVERSELL
        self.allow_oversell = allow_oversell
        self._records: dict[str, ItemRecord] = {}

    def __contains__(self, sku: str) -> bool:
        return sku in self._records

    def __len__(self) -> int:
        return len(self._records)

    def get(self, sku: str) -> ItemRecord | None:
        return self._records.get(sku)

    def receive(self, sku: str, quantity: int, price: float) -> None:
        """Receives `quantity` units of `sku` bought at `price` (dollars)."""
        if sku not in self._records:
            self._records[sku] = ItemRecord(allow_oversell=self.allow_oversell)
        self._records[sku].buy(quantity, price)

    def sell(self, sku: str, requested_quantity: int, price: float) -> None:
        """
        Sells up to `requested_quantity` units of `sku` at `price` (dollars).
        If the request exceeds the stock on hand, only the available units are sold.
        """
        record = self._records.get(sku)
        if record is None or record.num_available() <= 0:
            logger.warning(f"No inventory available of SKU {sku} to sell.")
            return

        available = record.num_available()
        sold_quantity = requested_quantity
        if requested_quantity > available:
            sold_quantity = available
            logger.warning(
                f"Insufficient inventory available of SKU {sku} for requested amount "
                f"{requested_quantity}. Selling {sold_quantity} instead."
            )
        record.sell(sold_quantity, price)

    def apply(self, transaction: Transaction) -> None:
        """Routes a validated transaction row to receive() or sell()."""
        if transaction.action == "receive":
            self.receive(transaction.sku, transaction.quantity, transaction.price)
        else:
            self.sell(transaction.sku, transaction.quantity, transaction.price)

    def apply_all(self, transactions: Iterable[Transaction]) -> None:
        for transaction in transactions:
            self.apply(transaction)

    def summary(self) -> list[ItemSummary]:
        """Returns the report figures for every SKU as validated models."""
        return [
            ItemSummary(
                sku=sku,
                units_sold=record.total_sold,
                units_in_stock=record.num_available(),
                profit=record.profit(),
                unsold_cost=record.unsold_cost(),
            )
            for sku, record in self._records.items()
        ]

    def report(self) -> None:
        """
        Prints, for each product in the inventory:
          a. number of items sold
          b. number of items in stock
          c. profit earned on the items sold
          d. cost of unsold items
        """
        for item in self.summary():
            print(f"{item.units_sold} boxes of {item.sku} have been sold")
            print(f"{item.units_in_stock} boxes of {item.sku} are currently in stock")
            print(f"Profit on {item.sku} is ${format_amount(item.profit)}")
            print(f"Unsold stock of {item.sku} has a cost of ${format_amount(item.unsold_cost)}")
