"""Value types produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Union


# ---------------------------------------------------------------------------
# Null — singleton for the empty document
# ---------------------------------------------------------------------------

class _NullType:
    """Singleton value of an empty document."""

    _instance: "_NullType | None" = None

    def __new__(cls) -> "_NullType":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Null"

    def __bool__(self) -> bool:
        return False

    def __str__(self) -> str:
        return "null"


Null = _NullType()


# ---------------------------------------------------------------------------
# Scalars
# ---------------------------------------------------------------------------

@dataclass
class VInteger:
    value: int

    def __str__(self) -> str:
        from .scalars import int_to_digits
        return int_to_digits(self.value)


@dataclass
class VNumber:
    value: float

    def __str__(self) -> str:
        v = self.value
        if v == int(v):
            return str(int(v))
        return str(v)


@dataclass
class VText:
    value: str

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Containers
# ---------------------------------------------------------------------------

@dataclass
class VArray:
    items: list["Value"] = field(default_factory=list)

    def append(self, value: "Value") -> None:
        self.items.append(value)

    def __getitem__(self, index: int) -> "Value":
        return self.items[index]

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator["Value"]:
        return iter(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass
class VObject:
    entries: dict[str, "Value"] = field(default_factory=dict)

    def __getitem__(self, key: str) -> "Value":
        return self.entries[key]

    def __setitem__(self, key: str, value: "Value") -> None:
        self.entries[key] = value

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def keys(self):
        return self.entries.keys()

    def items(self):
        return self.entries.items()

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k}: {v}" for k, v in self.entries.items()) + "}"


Value = Union[VInteger, VNumber, VText, VArray, VObject, _NullType]


# ---------------------------------------------------------------------------
# Conversion to / from plain Python data
# ---------------------------------------------------------------------------

def to_python(value: Value) -> Any:
    """Convert a Value tree into ``None``/``int``/``float``/``str``/``list``/``dict``."""
    if isinstance(value, _NullType):
        return None
    if isinstance(value, (VInteger, VNumber, VText)):
        return value.value
    if isinstance(value, VArray):
        return [to_python(v) for v in value.items]
    if isinstance(value, VObject):
        return {k: to_python(v) for k, v in value.entries.items()}
    raise TypeError(f"not a Value: {value!r}")


def from_python(obj: Any) -> Value:
    """Build a Value tree from plain Python data.

    ``bool`` is rejected rather than silently treated as an integer.
    """
    if obj is None:
        return Null
    if isinstance(obj, (VInteger, VNumber, VText, VArray, VObject, _NullType)):
        return obj
    if isinstance(obj, bool):
        raise TypeError("booleans have no Value counterpart")
    if isinstance(obj, int):
        return VInteger(obj)
    if isinstance(obj, float):
        return VNumber(obj)
    if isinstance(obj, str):
        return VText(obj)
    if isinstance(obj, (list, tuple)):
        return VArray([from_python(v) for v in obj])
    if isinstance(obj, dict):
        return VObject({str(k): from_python(v) for k, v in obj.items()})
    raise TypeError(f"cannot convert {type(obj).__name__} to a Value")
