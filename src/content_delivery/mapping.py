"""Map content item fields onto a caller-declared shape.

A shape names the content type it expects and the fields to read:

    article = CustomItemShape(
        type_name="Article",
        fields={"title": FieldType.TEXT, "views": FieldType.INTEGER, "notes": None},
    )
    values = map_fields(article, item)

Fields declared with a FieldType are read through the typed accessor;
fields declared with None are guessed and returned as strings.
"""

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from content_delivery.fields import FieldType

if TYPE_CHECKING:
    from schemas.asset import Asset

logger = logging.getLogger(__name__)


@dataclass
class CustomItemShape:
    """Declared content type name and field types for a custom item.

    Attributes:
        type_name: Content type the item is expected to have, or None to
            skip the check
        fields: Field name to expected FieldType, or None to guess
    """

    type_name: str | None
    fields: dict[str, FieldType | None] = field(default_factory=dict)


@dataclass
class MappedItem:
    """An asset together with the values read for a shape."""

    item: "Asset"
    values: dict[str, Any] = field(default_factory=dict)

    def __getitem__(self, field_name: str) -> Any:
        return self.values[field_name]


def verify_type_match(shape: CustomItemShape, asset: "Asset") -> bool:
    """Check the asset's type against the shape, logging a mismatch."""
    if shape.type_name is None or asset.type == shape.type_name:
        return True
    logger.warning(
        f"Expected content type {shape.type_name!r} does not match "
        f"server type {asset.type!r} for item {asset.id}"
    )
    return False


def _guess_value(asset: "Asset", field_name: str) -> str | None:
    guessed = asset.get_field_from_value(field_name)
    if guessed is None:
        return None
    text = guessed.value_as_string()
    return None if text == "null" else text


def map_fields(shape: CustomItemShape, asset: "Asset") -> dict[str, Any]:
    """Read every field declared by the shape from the asset.

    A type mismatch is logged and does not stop the mapping. Fields that
    are missing or hold a value of another type map to None.
    """
    verify_type_match(shape, asset)

    values: dict[str, Any] = {}
    for field_name, field_type in shape.fields.items():
        if field_type is None:
            values[field_name] = _guess_value(asset, field_name)
        else:
            found = asset.get_field(field_name, field_type)
            values[field_name] = found.value if found is not None else None
    return values


def map_item(shape: CustomItemShape, asset: "Asset") -> MappedItem:
    return MappedItem(item=asset, values=map_fields(shape, asset))
