"""
Tests for the per-SKU running average accounting
"""
import pytest

from sku_ledger.item_record import InsufficientInventoryError, ItemRecord


def test_new_record_is_empty(record):
    assert record.total_bought == 0
    assert record.total_sold == 0
    assert record.avg_purchase_price == 0.0
    assert record.avg_sale_price == 0.0
    assert record.num_available() == 0
    assert record.profit() == 0.0
    assert record.unsold_cost() == 0.0


def test_single_purchase(record):
    record.buy(5, 2.0)

    assert record.total_bought == 5
    assert record.num_available() == 5
    assert record.avg_purchase_price == pytest.approx(2.0)


def test_multiple_purchases_weighted_average(record):
    record.buy(5, 2.0)
    record.buy(3, 3.0)

    assert record.total_bought == 8
    assert record.avg_purchase_price == pytest.approx((5 * 2.0 + 3 * 3.0) / 8)


@pytest.mark.parametrize(
    "lots",
    [
        [(1, 10.0)],
        [(3, 1.25), (7, 4.0), (2, 0.5)],
        [(100, 2.99), (1, 100.0), (250, 1.01)],
    ],
)
def test_purchase_average_matches_weighted_mean(record, lots):
    for quantity, price in lots:
        record.buy(quantity, price)

    total = sum(q for q, _ in lots)
    assert record.total_bought == total
    assert record.avg_purchase_price == pytest.approx(sum(q * p for q, p in lots) / total)


def test_zero_quantity_buy_is_noop(record):
    record.buy(4, 2.0)
    record.buy(0, 50.0)

    assert record.total_bought == 4
    assert record.avg_purchase_price == pytest.approx(2.0)


def test_sale_average_matches_weighted_mean(record):
    record.buy(20, 1.0)
    record.sell(5, 2.0)
    record.sell(3, 3.0)

    assert record.total_sold == 8
    assert record.num_available() == 12
    assert record.avg_sale_price == pytest.approx((5 * 2.0 + 3 * 3.0) / 8)


def test_sell_more_than_available_raises(record):
    record.buy(4, 3.0)

    with pytest.raises(InsufficientInventoryError, match="more items than available"):
        record.sell(5, 2.0)

    # Nothing recorded on a rejected sale.
    assert record.total_sold == 0
    assert record.avg_sale_price == 0.0


def test_sell_without_stock_raises(record):
    with pytest.raises(InsufficientInventoryError):
        record.sell(1, 2.0)


def test_oversell_allowed_goes_negative():
    record = ItemRecord(allow_oversell=True)
    record.sell(5, 2.0)
    record.sell(3, 3.0)

    assert record.total_sold == 8
    assert record.num_available() == -8
    assert record.unsold_cost() == 0.0


def test_oversell_allowed_negative_unsold_cost():
    record = ItemRecord(allow_oversell=True)
    record.buy(2, 1.5)
    record.sell(5, 2.0)

    assert record.num_available() == -3
    assert record.unsold_cost() == pytest.approx(-4.5)


def test_positive_profit(record):
    record.buy(5, 2.0)
    record.sell(4, 3.0)

    assert record.profit() == pytest.approx(4.0)
    assert record.num_available() == 1
    assert record.unsold_cost() == pytest.approx(2.0)


def test_negative_profit(record):
    record.buy(5, 3.0)
    record.sell(4, 2.0)

    assert record.profit() == pytest.approx(-4.0)
    assert record.num_available() == 1
    assert record.unsold_cost() == pytest.approx(3.0)


def test_sample_problem(record):
    record.buy(8, 1.0)
    record.buy(2, 3.5)
    assert record.avg_purchase_price == pytest.approx(1.5)

    record.sell(2, 2.5)
    record.sell(4, 3.0)

    assert record.num_available() == 4
    assert record.profit() == pytest.approx(8.0)
    assert record.unsold_cost() == pytest.approx(6.0)


def test_derived_figures_follow_fields(record):
    record.buy(7, 1.1)
    record.sell(3, 2.2)
    record.buy(4, 0.9)
    record.sell(6, 1.7)

    assert record.num_available() == record.total_bought - record.total_sold
    assert record.unsold_cost() == pytest.approx(record.num_available() * record.avg_purchase_price)
    assert record.profit() == pytest.approx(
        record.total_sold * (record.avg_sale_price - record.avg_purchase_price)
    )


def test_profit_moves_with_later_purchases(record):
    record.buy(2, 1.0)
    record.sell(2, 2.0)
    assert record.profit() == pytest.approx(2.0)

    # A later, dearer lot raises the average cost of the units already sold.
    record.buy(2, 3.0)
    assert record.profit() == pytest.approx(0.0)


def test_large_volume_stays_close(record):
    record.buy(10_000, 0.1)
    record.buy(10_000, 0.3)

    assert record.avg_purchase_price == pytest.approx(0.2, rel=1e-9)


def test_accessors_are_read_only(record):
    with pytest.raises(AttributeError):
        record.total_bought = 3
    with pytest.raises(AttributeError):
        record.avg_sale_price = 1.0
