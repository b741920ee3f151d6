from pathlib import Path
from planchat.utilities.config import DATA_DIR

# Centralized paths for client-side data files (single source of truth)
THEME_FILE: Path = DATA_DIR / 'theme.json'

__all__ = ['DATA_DIR', 'THEME_FILE']
