import json
import logging
from datetime import date
from pathlib import Path

import pandas as pd
import requests

from . import settings
from . import utils
from .schemas import ItemSummary

logger = logging.getLogger(__name__)


def save_outputs(summary: list[ItemSummary]) -> Path:
    """Saves the summary report to CSV and conditionally to JSON, with dated filenames."""
    settings.OUTPUT_DIR.mkdir(parents=True, exist_ok=True)
    date_suffix = utils.get_date_suffix_for_filename()

    csv_path = settings.OUTPUT_DIR / f"{settings.REPORT_FILENAME_BASE}_{date_suffix}.csv"
    json_path = settings.OUTPUT_DIR / f"{settings.REPORT_FILENAME_BASE}_{date_suffix}.json"

    csv_columns = [
        field.alias or name for name, field in ItemSummary.model_fields.items()
    ]
    df = pd.DataFrame(
        [item.model_dump(by_alias=True) for item in summary], columns=csv_columns
    )
    df.to_csv(csv_path, index=False)
    logger.info(f"✅ Summary report saved to: {csv_path}")

    if settings.SAVE_JSON_OUTPUT:
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump([item.model_dump(by_alias=True) for item in summary], f, indent=2)
        logger.info(f"✅ JSON output saved to: {json_path}")
    else:
        logger.info("Skipping JSON file save as per configuration.")

    return csv_path


def post_to_webhook(summary: list[ItemSummary]) -> bool:
    """
    Posts the summary report to the configured webhook.
    Returns True on success; failures are logged, not raised.
    """
    if not settings.WEBHOOK_URL:
        logger.warning("⚠️ WEBHOOK_URL not set. Skipping webhook post.")
        return False

    logger.info(f"🚀 Posting summary to webhook: {settings.WEBHOOK_URL}")

    payload = {
        "reportData": [item.model_dump(mode="json", by_alias=True) for item in summary],
        "generatedAt": date.today().isoformat(),
    }

    try:
        response = requests.post(settings.WEBHOOK_URL, json=payload, timeout=15)
        response.raise_for_status()
        logger.info("✅ Summary successfully posted to webhook.")
        return True
    except requests.exceptions.RequestException as e:
        logger.error(f"❌ Error posting to webhook: {e}")
        return False
