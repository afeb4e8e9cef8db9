"""Data models for compose requests."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, List, Optional, Tuple

COMPLEX_FIELDS = (
    "other_headers",
    "continue_editing",
    "switch_function",
    "yank_action",
    "send_actions",
    "return_action",
)


def _is_present(value: Any) -> bool:
    if value is None or value is False:
        return False
    if isinstance(value, (str, bytes, list, tuple, dict, set, frozenset)):
        return len(value) > 0
    return True


@dataclass(slots=True)
class ComposeRequest:
    """The eight fields a host passes along with "compose a new mail"."""

    to: Optional[str] = None
    subject: Optional[str] = None
    other_headers: Any = None
    continue_editing: Any = None
    switch_function: Any = None
    yank_action: Any = None
    send_actions: Any = None
    return_action: Any = None

    @classmethod
    def from_args(cls, *args: Any) -> "ComposeRequest":
        if len(args) > len(fields(cls)):
            raise TypeError(
                f"compose takes at most {len(fields(cls))} arguments ({len(args)} given)"
            )
        return cls(*args)

    def as_args(self) -> Tuple[Any, ...]:
        return tuple(getattr(self, field.name) for field in fields(self))

    def complex_fields(self) -> List[str]:
        """Return the names of fields only a full mail user agent can honour."""

        return [name for name in COMPLEX_FIELDS if _is_present(getattr(self, name))]

    @property
    def is_complex(self) -> bool:
        return bool(self.complex_fields())
