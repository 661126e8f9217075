"""Record shapes returned by ``GET /info``.

Two mutually exclusive variants share the same base fields:

  - BaseRecord:     {"id", "name", "elements"}
  - ExtendedRecord: {"id", "name", "elements", "optional"}

They are independent frozen dataclasses joined by the ``Record`` union; the
extended variant is not a subclass of the base one.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping, Union

from .errors import RecordError


JsonObject = dict[str, Any]

DEFAULT_ID = 123
DEFAULT_NAME = "Sier"
DEFAULT_OPTIONAL = "Added"


@dataclass(frozen=True, slots=True)
class Element:
    inner: bool = True

    def to_dict(self) -> JsonObject:
        return {"inner": self.inner}


def _default_elements() -> tuple[Element, ...]:
    return (Element(),)


@dataclass(frozen=True, slots=True)
class BaseRecord:
    kind: ClassVar[str] = "base"

    id: int = DEFAULT_ID
    name: str = DEFAULT_NAME
    elements: tuple[Element, ...] = _default_elements()

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "name": self.name,
            "elements": [e.to_dict() for e in self.elements],
        }


@dataclass(frozen=True, slots=True)
class ExtendedRecord:
    kind: ClassVar[str] = "extended"

    id: int = DEFAULT_ID
    name: str = DEFAULT_NAME
    elements: tuple[Element, ...] = _default_elements()
    optional: str = DEFAULT_OPTIONAL

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "name": self.name,
            "elements": [e.to_dict() for e in self.elements],
            "optional": self.optional,
        }


Record = Union[BaseRecord, ExtendedRecord]


def build_record(extended: bool) -> Record:
    """Return the default record for the requested variant."""

    return ExtendedRecord() if extended else BaseRecord()


def _require(data: Mapping[str, Any], key: str, expected: type) -> Any:
    if key not in data:
        raise RecordError(f"missing field {key!r}")
    value = data[key]
    # bool is an int subclass; reject it where an int is expected.
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise RecordError(f"field {key!r} must be {expected.__name__}, got {type(value).__name__}")
    return value


def _element_from_dict(data: Any) -> Element:
    if not isinstance(data, Mapping):
        raise RecordError(f"element must be an object, got {type(data).__name__}")
    return Element(inner=_require(data, "inner", bool))


def record_from_dict(data: Any) -> Record:
    """Parse either /info JSON shape back into its record.

    The presence of an ``optional`` key selects ExtendedRecord.
    Raises RecordError on any shape mismatch.
    """

    if not isinstance(data, Mapping):
        raise RecordError(f"record must be an object, got {type(data).__name__}")

    record_id = _require(data, "id", int)
    name = _require(data, "name", str)
    elements = tuple(_element_from_dict(e) for e in _require(data, "elements", list))

    if "optional" in data:
        return ExtendedRecord(
            id=record_id,
            name=name,
            elements=elements,
            optional=_require(data, "optional", str),
        )
    return BaseRecord(id=record_id, name=name, elements=elements)
