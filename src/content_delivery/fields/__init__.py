"""Field types, typed field values and field type inference."""

from .field_type import FieldType
from .field_value import (
    FIELD_VALUE_CLASSES,
    AssetReferenceField,
    BooleanField,
    DateField,
    DecimalField,
    FieldValue,
    IntegerField,
    ItemReferenceField,
    JsonField,
    LargeTextField,
    ReferenceField,
    ReferenceListField,
    TextField,
    TextListField,
    UnknownField,
    is_rich_text,
)
from .inference import AssetResolver, infer_field

__all__ = [
    "FIELD_VALUE_CLASSES",
    "AssetReferenceField",
    "AssetResolver",
    "BooleanField",
    "DateField",
    "DecimalField",
    "FieldType",
    "FieldValue",
    "IntegerField",
    "ItemReferenceField",
    "JsonField",
    "LargeTextField",
    "ReferenceField",
    "ReferenceListField",
    "TextField",
    "TextListField",
    "UnknownField",
    "infer_field",
    "is_rich_text",
]
