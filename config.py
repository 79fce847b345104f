# config.py
from pathlib import Path

# --- Path Configuration ---
BASE_DIR = Path(__file__).parent
GENERATED_DIR = BASE_DIR / 'generated'

# Generated Output
CONSOLE_OUTPUT_PATH = GENERATED_DIR / 'console_output.txt'
EVENT_LOG_PATH = GENERATED_DIR / 'event_log.csv'

# --- Dashboard ---
PAGE_TITLE = "Docking Station Walkthrough"
