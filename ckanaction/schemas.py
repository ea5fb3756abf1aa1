"""Model of the envelope every CKAN action responds with."""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ActionResponse(BaseModel):
    """``{"help": ..., "success": ..., "result" | "error": ...}``.

    Opt-in: actions return the raw decoded JSON and never validate it.
    """

    model_config = ConfigDict(extra="allow")

    success: bool
    result: Any = None
    error: dict[str, Any] | None = None
    help: str | None = None

    @classmethod
    def parse(cls, value: Any) -> "ActionResponse":
        return cls.model_validate(value)

    @property
    def error_message(self) -> str | None:
        if not self.error:
            return None
        message = self.error.get("message")
        kind = self.error.get("__type")
        if message and kind:
            return f"{kind}: {message}"
        return message or kind or str(self.error)
