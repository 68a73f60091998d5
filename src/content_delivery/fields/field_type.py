"""Field type registry for content item fields."""

from enum import Enum


class FieldType(Enum):
    """Semantic kind of a content item field.

    Each member carries the type name as it appears in the content type
    definition and whether the field holds a list. CONTENT_ITEM and
    DIGITAL_ASSET share the "reference" wire name; they are told apart by
    whether the referenced object is a digital asset.
    """

    TEXT = ("text", "text")
    LARGE_TEXT = ("largetext", "largetext")
    DATE = ("date", "datetime")
    INTEGER = ("integer", "number")
    DECIMAL = ("decimal", "decimal")
    BOOLEAN = ("boolean", "boolean")
    CONTENT_ITEM = ("content_item", "reference")
    DIGITAL_ASSET = ("digital_asset", "reference")
    TEXT_LIST = ("text_list", "text", True)
    LARGE_TEXT_LIST = ("large_text_list", "largetext", True)
    REFERENCE_LIST = ("reference_list", "reference", True)
    JSON = ("json", "json")
    UNKNOWN = ("unknown", "?")

    def __new__(cls, key: str, wire_name: str, is_list: bool = False):
        member = object.__new__(cls)
        member._value_ = key
        member.wire_name = wire_name
        member.is_list = is_list
        return member

    @property
    def is_reference(self) -> bool:
        return self in (
            FieldType.CONTENT_ITEM,
            FieldType.DIGITAL_ASSET,
            FieldType.REFERENCE_LIST,
        )

    @classmethod
    def resolve(
        cls, wire_name: str, is_list: bool = False, is_asset: bool = False
    ) -> "FieldType | None":
        """Find the field type for a wire type name.

        Args:
            wire_name: Type name as it appears in the content type
            is_list: Whether the field holds a list of values
            is_asset: Whether a single reference points at a digital asset

        Returns:
            The matching FieldType, or None if nothing matches
        """
        for field_type in cls:
            if field_type.wire_name == wire_name and field_type.is_list == is_list:
                if field_type is cls.CONTENT_ITEM and is_asset:
                    return cls.DIGITAL_ASSET
                return field_type
        return None
