"""
Theme mod store

Customizer values are kept in a JSON file, read and written whole on every
access. An unset mod and a mod saved as an empty string both read back as
falsy values; callers that need a fallback must treat them alike.
"""

import json
import logging
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


class ThemeModStore:
    def __init__(self, path: str | Path):
        self.path = Path(path)

    def _load(self) -> dict[str, Any]:
        if self.path.exists():
            try:
                return json.loads(self.path.read_text(encoding="utf-8"))
            except (json.JSONDecodeError, OSError) as e:
                logger.warning(f"Failed to read theme mods file: {e}")
        return {}

    def _save(self, mods: dict[str, Any]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps(mods, indent=2, ensure_ascii=False),
            encoding="utf-8",
        )

    def get_theme_mod(self, name: str, default: Any = False) -> Any:
        """Return the stored value, or `default` when the mod was never saved."""
        return self._load().get(name, default)

    def set_theme_mod(self, name: str, value: Any) -> None:
        mods = self._load()
        mods[name] = value
        self._save(mods)

    def all(self) -> dict[str, Any]:
        return self._load()
