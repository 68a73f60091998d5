"""Typed field values produced from raw content item fields.

Each field value class wraps one deserialized field value and reports
the FieldType it represents. Field values are built by the inference
engine on demand; they are never stored on the asset they came from.
"""

import json
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from content_delivery.dates import ContentDate, ContentDateDisplayType

from .field_type import FieldType

if TYPE_CHECKING:
    from schemas.asset import Asset, ContentItem, DigitalAsset

RICH_TEXT_MARKER = "<!DOCTYPE html>"


def is_rich_text(text: str | None) -> bool:
    """Best-effort rich text check: the value starts with an HTML doctype."""
    return text is not None and text.startswith(RICH_TEXT_MARKER)


@dataclass(frozen=True)
class FieldValue:
    """Base class for all field values."""

    value: Any
    field_type: ClassVar[FieldType] = FieldType.UNKNOWN

    def value_as_string(self) -> str:
        return str(self.value)

    def __str__(self) -> str:
        return f"{self.field_type.name}::{self.value_as_string()}"


@dataclass(frozen=True)
class TextField(FieldValue):
    value: str
    field_type: ClassVar[FieldType] = FieldType.TEXT

    @property
    def rich_text(self) -> bool:
        return is_rich_text(self.value)


@dataclass(frozen=True)
class LargeTextField(TextField):
    field_type: ClassVar[FieldType] = FieldType.LARGE_TEXT


@dataclass(frozen=True)
class IntegerField(FieldValue):
    value: int
    field_type: ClassVar[FieldType] = FieldType.INTEGER


@dataclass(frozen=True)
class DecimalField(FieldValue):
    value: float
    field_type: ClassVar[FieldType] = FieldType.DECIMAL


@dataclass(frozen=True)
class BooleanField(FieldValue):
    value: bool
    field_type: ClassVar[FieldType] = FieldType.BOOLEAN

    def value_as_string(self) -> str:
        return "true" if self.value else "false"


@dataclass(frozen=True)
class DateField(FieldValue):
    value: ContentDate
    field_type: ClassVar[FieldType] = FieldType.DATE

    def value_as_string(self) -> str:
        display = self.value.parser().display_string(ContentDateDisplayType.DATE)
        if display is not None:
            return display
        return self.value.value if self.value.value is not None else "null"


@dataclass(frozen=True)
class JsonField(FieldValue):
    """A nested object that is neither a date nor a reference, kept as JSON text."""

    value: str
    field_type: ClassVar[FieldType] = FieldType.JSON

    def as_dict(self) -> dict[str, Any]:
        return json.loads(self.value)


@dataclass(frozen=True)
class ReferenceField(FieldValue):
    """A reference to another asset. The value is None for an empty reference."""

    value: "Asset | None" = None

    @property
    def id(self) -> str | None:
        return self.value.id if self.value is not None else None

    def value_as_string(self) -> str:
        if self.value is None:
            return "null"
        return self.value.name or self.value.id or ""


@dataclass(frozen=True)
class ItemReferenceField(ReferenceField):
    value: "ContentItem | None" = None
    field_type: ClassVar[FieldType] = FieldType.CONTENT_ITEM


@dataclass(frozen=True)
class AssetReferenceField(ReferenceField):
    value: "DigitalAsset | None" = None
    field_type: ClassVar[FieldType] = FieldType.DIGITAL_ASSET


@dataclass(frozen=True)
class ReferenceListField(FieldValue):
    value: list[ReferenceField] = field(default_factory=list)
    field_type: ClassVar[FieldType] = FieldType.REFERENCE_LIST

    def ids(self) -> list[str]:
        return [reference.id for reference in self.value if reference.id is not None]

    def value_as_string(self) -> str:
        return ", ".join(reference.value_as_string() for reference in self.value)


@dataclass(frozen=True)
class TextListField(FieldValue):
    """A list of strings. Rich text lists report LARGE_TEXT_LIST."""

    value: list[str] = field(default_factory=list)

    @property
    def rich_text(self) -> bool:
        return bool(self.value) and is_rich_text(self.value[0])

    @property
    def field_type(self) -> FieldType:
        return FieldType.LARGE_TEXT_LIST if self.rich_text else FieldType.TEXT_LIST

    def value_as_string(self) -> str:
        return ", ".join(self.value)


@dataclass(frozen=True)
class UnknownField(FieldValue):
    """Raw text for a null or unrecognized value."""

    value: str


# field value class expected for each field type
FIELD_VALUE_CLASSES: dict[FieldType, type[FieldValue]] = {
    FieldType.TEXT: TextField,
    FieldType.LARGE_TEXT: LargeTextField,
    FieldType.DATE: DateField,
    FieldType.INTEGER: IntegerField,
    FieldType.DECIMAL: DecimalField,
    FieldType.BOOLEAN: BooleanField,
    FieldType.CONTENT_ITEM: ItemReferenceField,
    FieldType.DIGITAL_ASSET: AssetReferenceField,
    FieldType.TEXT_LIST: TextListField,
    FieldType.LARGE_TEXT_LIST: TextListField,
    FieldType.REFERENCE_LIST: ReferenceListField,
    FieldType.JSON: JsonField,
    FieldType.UNKNOWN: UnknownField,
}
