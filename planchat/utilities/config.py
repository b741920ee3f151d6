"""Configuration management for the Plan Chat client."""
import os
from typing import Final
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).parent.parent.parent / '.env'
if env_path.exists():
    load_dotenv(env_path)

# Remote command service
API_BASE: Final[str] = os.getenv('PLANCHAT_API_BASE', 'http://localhost:8080/api/chatbot').rstrip('/')
TIMEOUT_SECONDS: Final[float] = float(os.getenv('PLANCHAT_TIMEOUT_SECONDS', '10'))

# Logging
LOG_LEVEL: Final[str] = os.getenv('PLANCHAT_LOG_LEVEL', 'WARNING').upper()

# Stub service (local development)
STUB_HOST: Final[str] = os.getenv('STUB_HOST', '127.0.0.1')
STUB_PORT: Final[int] = int(os.getenv('STUB_PORT', '8080'))

# File Paths
DATA_DIR: Final[Path] = Path(os.getenv('PLANCHAT_DATA_DIR', str(Path.home() / '.planchat'))).expanduser()
