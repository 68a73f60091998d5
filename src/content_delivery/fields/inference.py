"""Type inference for raw content item field values.

Content item fields come back from the server as plain decoded JSON,
with no type information attached. infer_field() turns one raw value
into a FieldValue, either checking it against the FieldType the caller
expects or, when no type is given, guessing from the shape of the value.

Guessing is less reliable than asking for a specific type: without the
content type definition a numeric string looks exactly like text, and a
whole-number decimal looks like an integer.
"""

import json
import logging
import math
from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from content_delivery.dates import ContentDate

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
)

if TYPE_CHECKING:
    from schemas.asset import Asset

logger = logging.getLogger(__name__)

AssetResolver = Callable[[Mapping[str, Any]], "Asset"]

EMPTY_ARRAY = "unknown array type"


def default_resolver(data: Mapping[str, Any]) -> "Asset":
    """Deserialize a nested reference object with the schemas asset model."""
    from schemas.asset import deserialize_asset

    return deserialize_asset(data)


def infer_field(
    value: Any,
    expected_type: FieldType | None = None,
    resolver: AssetResolver | None = None,
) -> FieldValue | None:
    """Convert a raw field value into a FieldValue.

    Args:
        value: Decoded JSON value of the field
        expected_type: FieldType the caller expects, or None to guess
        resolver: Callable turning a nested reference object into an Asset.
            Defaults to the schemas asset deserializer.

    Returns:
        The field value, or None if it does not match expected_type
    """
    resolver = resolver or default_resolver
    field = _infer(value, expected_type, resolver)

    if expected_type is not None and field is not None:
        if type(field) is not FIELD_VALUE_CLASSES[expected_type]:
            logger.warning(
                f"Expected {expected_type.name} field but found {field.field_type.name}"
            )
            return None

    return field


def _infer(
    value: Any, expected_type: FieldType | None, resolver: AssetResolver
) -> FieldValue | None:
    if value is None:
        # a reference field can exist without pointing at anything
        if expected_type is not None and expected_type.is_reference:
            return FIELD_VALUE_CLASSES[expected_type]()
        return UnknownField("null")

    # bool is checked before int since it is an int subclass
    if isinstance(value, bool):
        return BooleanField(value)

    if isinstance(value, float):
        if expected_type is FieldType.INTEGER:
            if not math.isfinite(value):
                logger.warning(f"Cannot read non-finite number {value} as an integer")
                return DecimalField(value)
            return IntegerField(int(value))
        return DecimalField(value)

    if isinstance(value, int):
        if expected_type is FieldType.DECIMAL:
            return DecimalField(float(value))
        return IntegerField(value)

    if isinstance(value, str):
        if expected_type is FieldType.LARGE_TEXT:
            return LargeTextField(value)
        return TextField(value)

    if isinstance(value, list):
        return _infer_list(value, expected_type, resolver)

    if isinstance(value, Mapping):
        return _infer_object(value, resolver)

    logger.warning(f"Unrecognized field value of type {type(value).__name__}")
    return UnknownField(str(value))


def _infer_list(
    values: list, expected_type: FieldType | None, resolver: AssetResolver
) -> FieldValue:
    if not values:
        if expected_type is not None and expected_type.is_list:
            return FIELD_VALUE_CLASSES[expected_type]()
        return UnknownField(EMPTY_ARRAY)

    if isinstance(values[0], str):
        if not all(isinstance(v, str) for v in values):
            logger.warning("Text list contains non-text values")
            return UnknownField(json.dumps(values))
        return TextListField(list(values))

    references: list[ReferenceField] = []
    for element in values:
        if not isinstance(element, Mapping):
            continue
        reference = _resolve_reference(element, resolver)
        if reference is not None:
            references.append(reference)
    return ReferenceListField(references)


def _infer_object(value: Mapping[str, Any], resolver: AssetResolver) -> FieldValue:
    if "timezone" in value:
        try:
            return DateField(ContentDate.model_validate(value))
        except ValueError as e:
            logger.warning(f"Could not read date field: {e}")
            return JsonField(json.dumps(dict(value)))

    if "id" in value and "type" in value:
        reference = _resolve_reference(value, resolver)
        if reference is not None:
            return reference

    return JsonField(json.dumps(dict(value)))


def _resolve_reference(
    value: Mapping[str, Any], resolver: AssetResolver
) -> ReferenceField | None:
    try:
        asset = resolver(value)
    except ValueError as e:
        logger.warning(f"Could not resolve reference {value.get('id')!r}: {e}")
        return None

    if asset.is_digital_asset():
        return AssetReferenceField(asset)
    return ItemReferenceField(asset)
