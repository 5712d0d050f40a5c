"""Infrastructure adapters for the key/value property store port."""

from __future__ import annotations

import json
import logging
from collections import defaultdict
from pathlib import Path
from typing import Any

from streamvol.application.ports import PropertyStore
from streamvol.domain.models import PERSIST_NAMESPACE

logger = logging.getLogger(__name__)

_DEFAULT_NAMESPACE = ""


def _namespace(namespace: str | None) -> str:
    return namespace or _DEFAULT_NAMESPACE


class InMemoryPropertyStore(PropertyStore):
    """Process-local store keeping one dict per namespace."""

    def __init__(self, initial: dict[str, dict[str, Any]] | None = None) -> None:
        self._values: dict[str, dict[str, str]] = defaultdict(dict)
        for namespace, values in (initial or {}).items():
            for key, value in values.items():
                self._values[namespace][key] = str(value)

    def get(self, key: str, namespace: str | None = None) -> str | None:
        return self._values[_namespace(namespace)].get(key)

    def set(self, key: str, value: Any, namespace: str | None = None) -> None:
        self._values[_namespace(namespace)][key] = str(value)

    def as_dict(self, namespace: str | None = None) -> dict[str, str]:
        return dict(self._values[_namespace(namespace)])


class JsonFilePropertyStore(InMemoryPropertyStore):
    """Store whose ``persist`` namespace is written through to a JSON file.

    Other namespaces behave like ``InMemoryPropertyStore``.
    """

    def __init__(self, path: Path) -> None:
        super().__init__()
        self.path = Path(path)
        self._values[PERSIST_NAMESPACE] = self._load()

    def _load(self) -> dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as error:
            logger.warning(
                "Property file unreadable; starting empty.",
                extra={"property_file": str(self.path)},
                exc_info=error,
            )
            return {}
        if not isinstance(payload, dict):
            logger.warning("Property file is not a JSON object; starting empty.", extra={"property_file": str(self.path)})
            return {}
        return {str(key): str(value) for key, value in payload.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp_path.write_text(
            json.dumps(self._values[PERSIST_NAMESPACE], indent=2, sort_keys=True),
            encoding="utf-8",
        )
        tmp_path.replace(self.path)

    def set(self, key: str, value: Any, namespace: str | None = None) -> None:
        super().set(key, value, namespace)
        if _namespace(namespace) == PERSIST_NAMESPACE:
            self._flush()
