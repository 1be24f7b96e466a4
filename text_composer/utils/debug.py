"""Helpers to persist composed buffers for debugging."""
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict

from text_composer.model.buffer import ComposedBuffer


class DebugDumper:
    """Writes intermediate artifacts onto disk for inspection."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory

    def dump(self, buffer: ComposedBuffer, name: str = "composed_buffer") -> Path:
        """Persist the buffer as JSON for offline analysis and return the file path."""
        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"{name}.json"
        path.write_text(json.dumps(self.to_payload(buffer), indent=2, ensure_ascii=False), encoding="utf-8")
        return path

    def to_payload(self, buffer: ComposedBuffer) -> Dict[str, Any]:
        return {
            "text": buffer.text,
            "base_attributes": self._serialize(buffer.base_attributes),
            "runs": [
                {"start": run.start, "end": run.end, "attributes": self._serialize(run.attributes)}
                for run in buffer.runs
            ],
        }

    def _serialize(self, value: Any) -> Any:
        if isinstance(value, Enum):
            return value.value
        if is_dataclass(value) and not isinstance(value, type):
            return {k: self._serialize(v) for k, v in asdict(value).items()}
        if isinstance(value, dict):
            return {self._serialize_key(k): self._serialize(v) for k, v in value.items()}
        if isinstance(value, (list, tuple)):
            return [self._serialize(v) for v in value]
        if isinstance(value, bytes):
            return f"<{len(value)} bytes>"
        if value is None or isinstance(value, (str, int, float, bool)):
            return value
        return repr(value)

    @staticmethod
    def _serialize_key(key: Any) -> str:
        if isinstance(key, Enum):
            return str(key.value)
        return str(key)
