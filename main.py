import sys

from sku_ledger import data_handler, parsers, settings
from sku_ledger.inventory import Inventory
from sku_ledger.logger import setup_logger
from sku_ledger.schemas import Transaction

# Sample day of trading, used when no TRANSACTIONS_FILE is configured.
SAMPLE_TRANSACTIONS = [
    Transaction(action="receive", sku="CORNFLAKES", quantity=8, price=1.0),
    Transaction(action="receive", sku="CORNFLAKES", quantity=2, price=3.5),
    Transaction(action="receive", sku="APPLEJACKS", quantity=3, price=2.5),
    Transaction(action="sell", sku="CORNFLAKES", quantity=2, price=2.5),
    Transaction(action="sell", sku="CORNFLAKES", quantity=4, price=3.0),
    Transaction(action="sell", sku="APPLEJACKS", quantity=4, price=1.5),
    Transaction(action="sell", sku="CINNAMONTOASTCRUNCH", quantity=4, price=3.0),
]


def run_process() -> int:
    """Replays the day's transactions, prints the report, and exports it if configured."""
    logger = setup_logger()

    transactions = SAMPLE_TRANSACTIONS
    if settings.TRANSACTIONS_FILE is not None:
        loaded = parsers.load_transactions(settings.TRANSACTIONS_FILE)
        if loaded is None:
            logger.error(f"❌ Could not load transactions from {settings.TRANSACTIONS_FILE}. Aborting.")
            return 1
        transactions = loaded

    inventory = Inventory()
    inventory.apply_all(transactions)
    inventory.report()

    if settings.SAVE_REPORT or settings.WEBHOOK_URL:
        summary = inventory.summary()
        if settings.SAVE_REPORT:
            data_handler.save_outputs(summary)
        if settings.WEBHOOK_URL:
            data_handler.post_to_webhook(summary)

    return 0


if __name__ == "__main__":
    sys.exit(run_process())
