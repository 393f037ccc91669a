"""Data models for DEP-12 validation results."""
from __future__ import annotations

from dataclasses import dataclass, field
import re
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional


class Dep12Error(ValueError):
    """Base class for errors raised by the dep12 package."""


class ConstructionError(Dep12Error):
    """Raised when a document cannot be built from the given source."""


_PLACEHOLDER = re.compile(r"%\((\w+)\)s")


@dataclass(frozen=True)
class ValidationWarning:
    """A templated validation finding.

    ``message`` may contain ``%(name)s`` placeholders which are filled from
    ``value``, ``field`` or any key of ``extra`` when rendered.
    """

    message: str
    field: str
    value: Any = None
    extra: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "extra", MappingProxyType(dict(self.extra)))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ValidationWarning":
        """Build a warning from a ``{field, message, value?, ...}`` mapping."""
        rest = {k: v for k, v in data.items() if k not in ("message", "field", "value")}
        return cls(
            message=str(data.get("message", "")),
            field=str(data.get("field", "")),
            value=data.get("value"),
            extra=rest,
        )

    @property
    def suggestion(self) -> Optional[str]:
        return self.extra.get("suggestion")

    @property
    def key(self) -> Optional[int]:
        return self.extra.get("key")

    def with_context(self, **changes: Any) -> "ValidationWarning":
        """Return a copy with ``field`` and/or extra context replaced."""
        field_name = changes.pop("field", self.field)
        return ValidationWarning(
            message=self.message,
            field=field_name,
            value=self.value,
            extra={**self.extra, **changes},
        )

    def render(self) -> str:
        context: Dict[str, Any] = {**self.extra, "field": self.field, "value": self.value}

        def substitute(match: "re.Match[str]") -> str:
            value = context.get(match.group(1))
            if value is None:
                return ""
            return str(value).replace("\n", "\\n")

        return _PLACEHOLDER.sub(substitute, self.message)

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"message": self.message, "field": self.field}
        if self.value is not None:
            data["value"] = self.value
        data.update(self.extra)
        return data

    def __str__(self) -> str:
        return self.render()


def render(warning: ValidationWarning) -> str:
    return warning.render()
