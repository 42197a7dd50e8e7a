from pathlib import Path

from grocery.utilities.config import DATA_DIR as _CONFIGURED_DATA_DIR

# Centralized paths for data files (single source of truth)
DATA_DIR = Path(_CONFIGURED_DATA_DIR).resolve()
GROCERY_LISTS_FILE = DATA_DIR / 'grocery_lists.json'

__all__ = ['DATA_DIR', 'GROCERY_LISTS_FILE']
