"""
Client-held session

The logged-in user is kept as a serialized record in a local key/value file,
the same way a browser keeps it in sessionStorage. It has no expiry and is not
signed: whoever holds the file holds the session.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from frontend.config import settings

logger = logging.getLogger(__name__)


class LocalStorage:
    """String key/value storage persisted as one JSON object"""

    def __init__(self, path: Path):
        self.path = Path(path)

    def _load(self) -> Dict[str, str]:
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                items = json.load(f)
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Local storage at {self.path} unreadable, starting empty: {e}")
            return {}
        return items if isinstance(items, dict) else {}

    def _save(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(items, f, ensure_ascii=False)

    def get_item(self, key: str) -> Optional[str]:
        return self._load().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._load()
        items[key] = value
        self._save(items)

    def remove_item(self, key: str) -> None:
        items = self._load()
        if items.pop(key, None) is not None:
            self._save(items)


class SessionStore:
    """The authenticated user under a fixed storage key"""

    def __init__(self, storage: Optional[LocalStorage] = None, key: str = settings.SESSION_KEY):
        self.storage = storage or LocalStorage(settings.SESSION_FILE)
        self.key = key

    def get(self) -> Optional[Dict[str, Any]]:
        raw = self.storage.get_item(self.key)
        if not raw:
            return None
        try:
            user = json.loads(raw)
        except ValueError:
            logger.warning("Stored session is not valid JSON, ignoring it")
            return None
        return user if isinstance(user, dict) else None

    def set(self, user: Dict[str, Any]) -> None:
        self.storage.set_item(self.key, json.dumps(user, ensure_ascii=False))

    def clear(self) -> None:
        self.storage.remove_item(self.key)
