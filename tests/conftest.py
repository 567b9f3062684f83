"""
Pytest configuration and fixtures for the ledger tests
"""
import logging

import pytest

from sku_ledger import settings
from sku_ledger.inventory import Inventory
from sku_ledger.item_record import ItemRecord


@pytest.fixture
def record():
    """A fresh record with the overselling guard on"""
    return ItemRecord()


@pytest.fixture
def inventory():
    """An empty inventory with the overselling guard on"""
    return Inventory(allow_oversell=False)


@pytest.fixture
def isolated_settings(tmp_path, monkeypatch):
    """Point every output location at a temp dir and switch off optional exports"""
    monkeypatch.setattr(settings, "OUTPUT_DIR", tmp_path / "output")
    monkeypatch.setattr(settings, "LOG_DIR", tmp_path / "logs")
    monkeypatch.setattr(settings, "TRANSACTIONS_FILE", None)
    monkeypatch.setattr(settings, "SAVE_REPORT", False)
    monkeypatch.setattr(settings, "SAVE_JSON_OUTPUT", False)
    monkeypatch.setattr(settings, "WEBHOOK_URL", None)
    monkeypatch.setattr(settings, "ALLOW_OVERSELL", False)
    yield tmp_path

    # Drop handlers bound to this test's temp dir and captured streams.
    package_logger = logging.getLogger("sku_ledger")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
        handler.close()
