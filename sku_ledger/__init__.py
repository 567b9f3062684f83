"""Per-SKU weighted-average cost ledger."""
