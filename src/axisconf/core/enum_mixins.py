# topmark:header:start
#
#   project      : AxisConf
#   file         : enum_mixins.py
#   file_relpath : src/axisconf/core/enum_mixins.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""String enums keyed by the attribute value they stand for.

Axis attributes such as ``type`` or a range break's ``pattern`` are stored as
plain strings in resolved axes. `KeyedStrEnum` gives those closed vocabularies
a typed face without changing what is written: a member *is* its string value.

```python
class Mode(KeyedStrEnum):
    A = ("alpha", "Alpha mode", ("a",))
    B = ("beta", "Beta mode")

assert Mode.A == "alpha"
assert Mode.parse("alpha") is Mode.A     # value, exact
assert Mode.parse(" A ") is Mode.A       # member name, normalized
assert Mode.parse("gamma") is None
```
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

_E = TypeVar("_E", bound="KeyedStrEnum")


def normalize_token(text: str) -> str:
    """Fold case, surrounding blanks, ``-`` and inner spaces for loose matching."""
    return "_".join(text.strip().lower().replace("-", " ").split())


class KeyedStrEnum(str, Enum):
    """`str` enum whose value is the attribute value, with a label and aliases.

    Members are declared as ``(value, label)`` or ``(value, label, aliases)``.

    Attributes:
        label (str): Short description (used in CLI help).
        aliases (tuple[str, ...]): Extra spellings accepted by `parse`.
    """

    label: str
    aliases: tuple[str, ...]

    def __new__(cls: type[_E], value: str, label: str, aliases: Iterable[str] = ()) -> _E:
        member: _E = str.__new__(cls, value)
        member._value_ = value
        member.label = label
        member.aliases = tuple(aliases)
        return member

    def __str__(self) -> str:
        return str(self.value)

    @classmethod
    def keys(cls) -> tuple[str, ...]:
        """Return the member values in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def parse(cls: type[_E], raw: object) -> _E | None:
        """Return the member for ``raw``, or None.

        The value is matched exactly first, so values that normalize to nothing
        (``"-"``, ``""``) still resolve. Otherwise the normalized token is
        compared with each member's name and aliases. Non-strings never match.
        """
        if not isinstance(raw, str):
            return None
        for member in cls:
            if raw == member.value:
                return member

        token = normalize_token(raw)
        if not token:
            return None
        for member in cls:
            spellings = (member.name, *member.aliases)
            if any(token == normalize_token(s) for s in spellings):
                return member
        return None
