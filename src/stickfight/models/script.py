"""Intent scripts - timed input playback with save/load."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from stickfight.models.enums import Intent


class ScriptLoadError(ValueError):
    """Raised when an intent script file cannot be loaded."""


class IntentEvent(BaseModel):
    """An intent delivered just before the given tick is computed."""

    tick: int = Field(ge=0)
    intent: Intent


class IntentScript(BaseModel):
    """A fixed-length run of ticks with intents injected along the way."""

    name: str = "untitled"
    ticks: int = Field(default=60, gt=0)
    start_x: float | None = None
    events: list[IntentEvent] = Field(default_factory=list)

    def events_at(self, tick: int) -> list[Intent]:
        return [e.intent for e in self.events if e.tick == tick]

    def save(self, path: Path) -> Path:
        """Save script to a JSON file."""
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.model_dump_json(indent=2))
        return path

    @classmethod
    def load(cls, path: Path) -> IntentScript:
        """Load script from a JSON file."""
        try:
            text = path.read_text()
        except FileNotFoundError:
            msg = f"script file not found: {path}"
            raise ScriptLoadError(msg) from None
        except PermissionError:
            msg = f"permission denied reading script file: {path}"
            raise ScriptLoadError(msg) from None
        except IsADirectoryError:
            msg = f"script path is a directory: {path}"
            raise ScriptLoadError(msg) from None
        try:
            data = json.loads(text)
        except json.JSONDecodeError as exc:
            msg = f"script file contains invalid JSON: {exc}"
            raise ScriptLoadError(msg) from None
        try:
            return cls.model_validate(data)
        except PydanticValidationError as exc:
            msg = f"script file has invalid structure: {exc}"
            raise ScriptLoadError(msg) from None
