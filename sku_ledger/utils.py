import logging
from datetime import datetime
from pathlib import Path
import pandas as pd

logger = logging.getLogger(__name__)


def get_date_suffix_for_filename() -> str:
    """Returns the current date as a YYYY-MM-DD string for filenames."""
    return datetime.now().strftime("%Y-%m-%d")


def load_csv(file_path: Path, **read_kwargs) -> pd.DataFrame | None:
    """
    A CSV loader with an encoding fallback.
    It will attempt to read a file in the following order:
    1. UTF-8 with BOM support ('utf-8-sig').
    2. Latin-1, which reads any byte but may misinterpret characters.
    Extra keyword arguments (e.g. dtype) are passed through to pd.read_csv.
    """
    try:
        return pd.read_csv(file_path, encoding="utf-8-sig", **read_kwargs)

    except UnicodeDecodeError:
        logger.info(f"UTF-8 decoding failed for {file_path.name}. Retrying with 'latin-1'.")
        try:
            return pd.read_csv(file_path, encoding="latin-1", **read_kwargs)
        except (pd.errors.ParserError, pd.errors.EmptyDataError) as e_latin1:
            logger.error(f"Could not read {file_path.name} even with latin-1. Reason: {e_latin1}")
            return None

    except FileNotFoundError:
        logger.warning(f"File not found at {file_path}, skipping.")
        return None

    except (pd.errors.ParserError, pd.errors.EmptyDataError) as e_general:
        logger.error(f"Could not parse {file_path.name}. Reason: {e_general}")
        return None
