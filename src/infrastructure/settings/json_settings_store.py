"""
Infrastructure adapter: JSON file → ILanguageSettingsStore.

Persists the single selected-language option. A missing or unreadable file
means no language is selected, which silently disables translation.
Writes go to a temporary file in the same directory and are swapped in with
os.replace, so concurrent readers see either the old or the new selection.
"""

import json
import logging
import os
import tempfile
import threading
from typing import Optional

from src.domain.entities.post_translation import SUPPORTED_LANGUAGES
from src.domain.ports.settings_store_port import ILanguageSettingsStore

logger = logging.getLogger(__name__)


class JsonFileLanguageSettingsStore(ILanguageSettingsStore):
    _KEY = "selected_language"

    def __init__(self, path: str) -> None:
        self._path = path
        self._lock = threading.Lock()

    def get_selected_language(self) -> Optional[str]:
        try:
            with open(self._path, "r", encoding="utf-8") as fh:
                data = json.load(fh)
        except FileNotFoundError:
            return None
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Could not read language settings from %s: %s", self._path, exc)
            return None
        code = data.get(self._KEY) if isinstance(data, dict) else None
        return code if code in SUPPORTED_LANGUAGES else None

    def set_selected_language(self, code: str) -> None:
        if code not in SUPPORTED_LANGUAGES:
            raise ValueError(
                f"Unsupported language {code!r}; expected one of {sorted(SUPPORTED_LANGUAGES)}"
            )
        directory = os.path.dirname(os.path.abspath(self._path))
        with self._lock:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".settings-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump({self._KEY: code}, fh)
                os.replace(tmp_path, self._path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.remove(tmp_path)
                raise
        logger.info("Selected translation language set to %s", code)
