import json
import os
import tempfile
from pathlib import Path

import structlog

logger = structlog.get_logger()


def load_ui_prefs(path: str | Path) -> dict:
    p = Path(path)
    try:
        if not p.exists():
            return {}
        data = json.loads(p.read_text(encoding="utf-8"))
        return data if isinstance(data, dict) else {}
    except (OSError, ValueError, RecursionError):
        return {}


def save_ui_prefs(path: str | Path, prefs: dict) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=".routine-builder-tmp-", dir=str(p.parent))
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(json.dumps(prefs, indent=2))
        os.replace(tmp_name, str(p))
    finally:
        if os.path.exists(tmp_name):
            os.remove(tmp_name)


def coerce_ids(raw) -> list[int]:
    if not isinstance(raw, list):
        return []
    out: list[int] = []
    for item in raw:
        if isinstance(item, bool):
            continue
        try:
            value = int(item)
        except (TypeError, ValueError):
            continue
        if value and value not in out:
            out.append(value)
    return out


class SelectionStore:
    """Best-effort persistence of the selected product ids.

    The ids live under one key of a small JSON key-value file. Neither method
    raises: a broken store degrades to an in-memory-only selection.
    """

    def __init__(self, path: str | Path, key: str = "selectedProducts") -> None:
        self.path = Path(path)
        self.key = key

    def load(self) -> list[int]:
        prefs = load_ui_prefs(self.path)
        raw = prefs.get(self.key)
        # Older files hold the list as a JSON-encoded string.
        if isinstance(raw, str):
            try:
                raw = json.loads(raw)
            except (ValueError, RecursionError):
                logger.warning("selection_load_corrupt", path=str(self.path))
                return []
        return coerce_ids(raw)

    def save(self, ids) -> None:
        try:
            prefs = load_ui_prefs(self.path)
            prefs[self.key] = [int(i) for i in ids]
            save_ui_prefs(self.path, prefs)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("selection_save_failed", path=str(self.path), error=str(exc))
