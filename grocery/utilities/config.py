"""Configuration management for the grocery list service."""
import os
from typing import Final, Optional
from pathlib import Path

from dotenv import load_dotenv

env_path = Path(__file__).parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Application Settings
APP_HOST: Final[str] = os.getenv('APP_HOST', '0.0.0.0')
APP_PORT: Final[int] = int(os.getenv('APP_PORT', '8000'))
DEBUG: Final[bool] = os.getenv('DEBUG', 'False').lower() == 'true'
LOG_LEVEL: Final[str] = os.getenv('LOG_LEVEL', 'DEBUG' if DEBUG else 'INFO').upper()

# Pricing / budget policy
DEFAULT_PRICE: Final[float] = float(os.getenv('DEFAULT_PRICE', '5.0'))
ALTERNATIVE_PRICE_THRESHOLD: Final[float] = float(os.getenv('ALTERNATIVE_PRICE_THRESHOLD', '10.0'))
FLEXIBLE_TOLERANCE: Final[float] = float(os.getenv('FLEXIBLE_TOLERANCE', '0.15'))
UNDER_BUDGET_RATIO: Final[float] = float(os.getenv('UNDER_BUDGET_RATIO', '0.9'))

# Optional JSON file replacing the bundled price table (regional prices)
_catalog_file = os.getenv('PRICE_CATALOG_FILE', '')
PRICE_CATALOG_FILE: Final[Optional[Path]] = Path(_catalog_file) if _catalog_file else None

# File Paths
BASE_DIR: Final[Path] = Path(__file__).parent.parent
DATA_DIR: Final[Path] = Path(os.getenv('GROCERY_DATA_DIR', str(BASE_DIR / 'data')))
