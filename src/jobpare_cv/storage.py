import json
import logging
from pathlib import Path
from typing import Any, Union

logger = logging.getLogger(__name__)

DEFAULT_PREFIX = "cvgen_"


class LocalStore:
    """
    Small key/value store for editor state, one JSON file per key.

    Read and write problems are logged and otherwise ignored: losing a saved
    draft must never stop the editor from working.
    """

    def __init__(self, directory: Union[str, Path], prefix: str = DEFAULT_PREFIX):
        self.directory = Path(directory)
        self.prefix = prefix

    def _path(self, key: str) -> Path:
        return self.directory / f"{self.prefix}{key}.json"

    def save(self, key: str, data: Any) -> bool:
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            self._path(key).write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Failed to save '%s' to storage: %s", key, e)
            return False
        return True

    def load(self, key: str) -> Any:
        path = self._path(key)
        if not path.exists():
            return None
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning("Failed to load '%s' from storage: %s", key, e)
            return None

    def remove(self, key: str) -> None:
        self._path(key).unlink(missing_ok=True)
