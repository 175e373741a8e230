from pathlib import Path
import os

APP_NAME = "BatchUpgrader"

BASE_DIR = Path(os.getenv("LOCALAPPDATA", Path.home())) / APP_NAME
LOG_DIR = BASE_DIR / "logs"
