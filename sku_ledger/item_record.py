class InsufficientInventoryError(ValueError):
    """Raised when a record is asked to sell more units than it holds."""


def _update_average(quantity: int, value: float, start_count: int, current_avg: float) -> float:
    """
    Folds `quantity` samples of `value` into a running mean, one unit at a time.
    Equivalent to a quantity-weighted mean without keeping the history.
    """
    for count in range(start_count, start_count + quantity):
        current_avg += (value - current_avg) / (count + 1)
    return current_avg


class ItemRecord:
    """
    Running accounting state for a single SKU.

    Tracks the units bought and sold to date and the weighted average purchase
    and sale prices. Profit and unsold cost are derived from the current
    averages every time they are asked for, so they shift when later buys
    move the average cost of units that were already sold.
    """

    def __init__(self, allow_oversell: bool = False):
        self.allow_oversell = allow_oversell
        self._total_bought = 0
        self._total_sold = 0
        self._avg_purchase_price = 0.0
        self._avg_sale_price = 0.0

    @property
    def total_bought(self) -> int:
        return self._total_bought

    @property
    def total_sold(self) -> int:
        return self._total_sold

    @property
    def avg_purchase_price(self) -> float:
        return self._avg_purchase_price

    @property
    def avg_sale_price(self) -> float:
        return self._avg_sale_price

    def buy(self, quantity: int, price: float) -> None:
        """Records `quantity` units bought at `price` (dollars)."""
        self._avg_purchase_price = _update_average(
            quantity, price, self._total_bought, self._avg_purchase_price
        )
        self._total_bought += quantity

    def sell(self, quantity: int, price: float) -> None:
        """
        Records `quantity` units sold at `price` (dollars).

        Raises InsufficientInventoryError if `quantity` exceeds the units
        available, unless the record was created with allow_oversell=True.
        """
        if not self.allow_oversell and quantity > self.num_available():
            raise InsufficientInventoryError("Can not sell more items than available.")

        self._avg_sale_price = _update_average(
            quantity, price, self._total_sold, self._avg_sale_price
        )
        self._total_sold += quantity

    def num_available(self) -> int:
        # Signed: negative once an unguarded record oversells.
        return self._total_bought - self._total_sold

    def profit(self) -> float:
        return self._total_sold * (self._avg_sale_price - self._avg_purchase_price)

    def unsold_cost(self) -> float:
        return self.num_available() * self._avg_purchase_price

    def __repr__(self) -> str:
        return (
            f"ItemRecord(bought={self._total_bought}, sold={self._total_sold}, "
            f"avg_purchase={self._avg_purchase_price:g}, avg_sale={self._avg_sale_price:g})"
        )
