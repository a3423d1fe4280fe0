"""In-process key/value memory used by the save and recall intents."""

from collections.abc import Iterator

from mockagent.core.logging import get_logger

logger = get_logger("memory.store")


def normalize_key(key: str) -> str:
    """Keys are matched case-insensitively and without surrounding whitespace."""
    return key.strip().lower()


class KeyValueMemory:
    """Mapping of normalized key to trimmed value. Last write wins."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        """Get stored value, None if the key was never saved."""
        return self._values.get(normalize_key(key))

    def set(self, key: str, value: str) -> str:
        """Store value under the normalized key, return that key."""
        key = normalize_key(key)
        value = value.strip()
        if key in self._values:
            logger.debug(f"Overwriting memory '{key}'")
        self._values[key] = value
        logger.debug(f"Remembered '{key}' ({len(self._values)} keys stored)")
        return key

    def keys(self) -> list[str]:
        return list(self._values)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and normalize_key(key) in self._values

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)
