import os
from pathlib import Path


APP_TITLE = "Routine Builder"

APP_DIR = Path(__file__).resolve().parent


WORKER_URL = os.getenv("WORKER_URL", "https://loreal-worker.axtorr7701.workers.dev/")
CATALOG_SOURCE = os.getenv("CATALOG_SOURCE", str(APP_DIR / "products.json"))

DATA_DIR = Path(os.getenv("ROUTINE_BUILDER_DATA_DIR") or (APP_DIR.parent / "config"))
SELECTION_FILE = DATA_DIR / "selection.json"
SELECTION_KEY = "selectedProducts"


WORKER_TIMEOUT_S = float(os.getenv("WORKER_TIMEOUT_S", "30"))
CATALOG_TIMEOUT_S = float(os.getenv("CATALOG_TIMEOUT_S", "10"))
PAGE_SIZE = 9
CHAT_CONTEXT_TURNS = int(os.getenv("CHAT_CONTEXT_TURNS", "12"))
SEARCH_DEBOUNCE_MS = int(os.getenv("SEARCH_DEBOUNCE_MS", "200"))


ENVIRONMENT = os.getenv("ENVIRONMENT", "development")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FILE = os.getenv("LOG_FILE", "")


SIDEBAR_WIDTH = 340
CHAT_HEIGHT = 320
