import logging
from pathlib import Path
from pydantic import ValidationError

from .schemas import Transaction
from .utils import load_csv

logger = logging.getLogger(__name__)

# Columns every transaction file must carry, by their CSV alias.
REQUIRED_COLUMNS = [
    field.alias or name for name, field in Transaction.model_fields.items()
]


def load_transactions(file_path: Path) -> list[Transaction] | None:
    """
    Loads a transaction batch file and validates every row against the Transaction schema.
    Returns None if the file is missing, unreadable, or any row fails validation.
    """
    # Read every cell as text so SKUs like 007 keep their leading zeros;
    # the schema converts Quantity and Price itself.
    df = load_csv(file_path, dtype=str)
    if df is None:
        return None

    # Tolerate stray whitespace and casing differences in the header row.
    alias_lookup = {alias.lower(): alias for alias in REQUIRED_COLUMNS}
    df = df.rename(columns=lambda col: alias_lookup.get(str(col).strip().lower(), col))

    missing = [col for col in REQUIRED_COLUMNS if col not in df.columns]
    if missing:
        logger.error(f"❌ {file_path.name} is missing columns: {missing}")
        return None

    df = df[REQUIRED_COLUMNS].dropna(how="all").copy()
    df["Action"] = df["Action"].astype(str).str.strip().str.lower()

    try:
        transactions = [Transaction(**row) for row in df.to_dict("records")]
    except ValidationError as e:
        logger.error(f"❌ Transaction validation failed for {file_path.name}!")
        logger.error(e)
        return None

    logger.info(f"✅ Loaded {len(transactions)} transactions from {file_path.name}.")
    return transactions
