"""Asset schemas: content items and digital assets.

Every object the delivery API returns for an item is an asset, either a
content item (structured content with an open-ended "fields" object) or
a digital asset (a file with renditions). Both share the same envelope
and the same typed field accessors; deserialize_asset() picks the
variant from the "type" and "typeCategory" markers.

Field values are read from the raw "fields" object each time an accessor
is called. A typed accessor returns None when the field is missing or
its value does not have the requested type.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from pydantic import BaseModel, Field, PrivateAttr, ValidationError, field_validator

from content_delivery.dates import ContentDate
from content_delivery.fields import FieldType, FieldValue, ReferenceField, infer_field
from content_delivery.once import Once
from content_delivery.pagination import PaginatedListResult
from content_delivery.renditions import (
    RenditionCriteria,
    RenditionType,
    find_rendition,
    preferred_format,
)

from .digital_asset import (
    AdvancedVideoInfo,
    AdvancedVideoInfoProperties,
    DigitalAssetFields,
    DigitalAssetRendition,
    RenditionFormat,
)
from .links import AssetLink, ItemList
from .taxonomy import Taxonomy

logger = logging.getLogger(__name__)

# value of mimeType, fileGroup and fileExtension for content items
CONTENT_ITEM = "contentItem"


class AssetKind(Enum):
    CONTENT_ITEM = "contentItem"
    DIGITAL_ASSET = "digitalAsset"


@dataclass(frozen=True)
class AssetType:
    """The "type" and "typeCategory" markers of an asset.

    Attributes:
        type: Type name, e.g. "Image" or a custom content type name
        type_category: "DigitalAssetType", "ContentItemType" or None
    """

    TYPE_DIGITAL_ASSET: ClassVar[str] = "DigitalAsset"
    TYPE_ASSET_FILE: ClassVar[str] = "File"
    TYPE_ASSET_IMAGE: ClassVar[str] = "Image"
    TYPE_ASSET_VIDEO: ClassVar[str] = "Video"
    TYPE_ASSET_VIDEO_PLUS: ClassVar[str] = "Video-Plus"
    TYPE_CATEGORY_DIGITAL_ASSET: ClassVar[str] = "DigitalAssetType"
    TYPE_CATEGORY_CONTENT_ITEM: ClassVar[str] = "ContentItemType"

    type: str | None
    type_category: str | None = None

    @classmethod
    def from_json(cls, data: Mapping[str, Any]) -> "AssetType":
        return cls(data.get("type"), data.get("typeCategory"))

    def is_digital_asset(self) -> bool:
        # older servers leave typeCategory unset and use the "DigitalAsset" type
        if self.type_category is not None:
            return self.type_category == self.TYPE_CATEGORY_DIGITAL_ASSET
        return self.type == self.TYPE_DIGITAL_ASSET


STANDARD_ASSET_TYPES = (
    AssetType.TYPE_ASSET_FILE,
    AssetType.TYPE_ASSET_IMAGE,
    AssetType.TYPE_ASSET_VIDEO,
    AssetType.TYPE_ASSET_VIDEO_PLUS,
)


class Asset(BaseModel):
    """Fields shared by content items and digital assets."""

    kind: ClassVar[AssetKind]

    id: str
    name: str | None = None
    type: str | None = None
    type_category: str | None = Field(default=None, alias="typeCategory")
    description: str | None = None
    slug: str | None = None
    language: str | None = None
    translatable: bool | None = None
    created_date: ContentDate | None = Field(default=None, alias="createdDate")
    updated_date: ContentDate | None = Field(default=None, alias="updatedDate")
    mime_type: str | None = Field(default=None, alias="mimeType")
    file_group: str | None = Field(default=None, alias="fileGroup")
    file_extension: str | None = Field(default=None, alias="fileExtension")
    taxonomies: ItemList[Taxonomy] | None = None
    raw_fields: dict[str, Any] = Field(default_factory=dict, alias="fields")
    links: list[AssetLink] = []

    model_config = {"extra": "allow", "populate_by_name": True}

    @field_validator("raw_fields", mode="before")
    @classmethod
    def _empty_fields(cls, value):
        return {} if value is None else value

    @property
    def content_type(self) -> AssetType:
        return AssetType(self.type, self.type_category)

    def is_digital_asset(self) -> bool:
        return self.content_type.is_digital_asset()

    def is_reference_only(self) -> bool:
        """True when only the identifying fields were returned.

        Assets embedded in another item's reference field carry little
        more than id and type; a created date is only present on fully
        fetched assets.
        """
        return self.created_date is None

    def get_field(self, field_name: str, field_type: FieldType) -> FieldValue | None:
        """Return a field as the given type.

        Args:
            field_name: Name of the field in the "fields" object
            field_type: Type the field is expected to have

        Returns:
            The field value, or None if the field is missing or its value
            does not have the expected type
        """
        if field_name not in self.raw_fields:
            return None
        return infer_field(self.raw_fields[field_name], field_type, deserialize_asset)

    def get_field_from_value(self, field_name: str) -> FieldValue | None:
        """Return a field, guessing its type from its value.

        Prefer get_field() or the typed accessors when the field type is
        known; a guess can pick the wrong type, e.g. text for a number
        sent as a string.
        """
        if field_name not in self.raw_fields:
            return None
        return infer_field(self.raw_fields[field_name], None, deserialize_asset)

    def get_fields_map(self) -> dict[str, FieldValue | None]:
        """Guess the type of every field, for inspection."""
        return {
            name: infer_field(value, None, deserialize_asset)
            for name, value in self.raw_fields.items()
        }

    def _field_value(self, field_name: str, field_type: FieldType) -> Any:
        field = self.get_field(field_name, field_type)
        return field.value if field is not None else None

    def get_text_field(self, field_name: str) -> str | None:
        return self._field_value(field_name, FieldType.TEXT)

    def get_large_text_field(self, field_name: str) -> str | None:
        return self._field_value(field_name, FieldType.LARGE_TEXT)

    def get_integer_field(self, field_name: str) -> int | None:
        return self._field_value(field_name, FieldType.INTEGER)

    def get_decimal_field(self, field_name: str) -> float | None:
        return self._field_value(field_name, FieldType.DECIMAL)

    def get_boolean_field(self, field_name: str) -> bool | None:
        return self._field_value(field_name, FieldType.BOOLEAN)

    def get_date_field(self, field_name: str) -> ContentDate | None:
        return self._field_value(field_name, FieldType.DATE)

    def get_json_field(self, field_name: str) -> str | None:
        return self._field_value(field_name, FieldType.JSON)

    def get_text_list_field(self, field_name: str) -> list[str] | None:
        return self._field_value(field_name, FieldType.TEXT_LIST)

    def get_content_item_field(self, field_name: str) -> "ContentItem | None":
        return self._field_value(field_name, FieldType.CONTENT_ITEM)

    def get_digital_asset_field(self, field_name: str) -> "DigitalAsset | None":
        return self._field_value(field_name, FieldType.DIGITAL_ASSET)

    def get_reference_list_field(self, field_name: str) -> list[ReferenceField] | None:
        return self._field_value(field_name, FieldType.REFERENCE_LIST)

    def get_reference_list_ids(self, field_name: str) -> list[str]:
        references = self.get_reference_list_field(field_name) or []
        return [reference.id for reference in references if reference.id is not None]


class ContentItem(Asset):
    """A structured content record."""

    kind: ClassVar[AssetKind] = AssetKind.CONTENT_ITEM


class DigitalAsset(Asset):
    """An image, video or other file, with its renditions.

    A digital asset embedded in a reference field is usually reference
    only; its rendition data is only available once fully fetched.
    """

    kind: ClassVar[AssetKind] = AssetKind.DIGITAL_ASSET

    _asset_fields: Once = PrivateAttr(default_factory=Once)

    def __copy__(self):
        copied = super().__copy__()
        copied._asset_fields = Once()
        return copied

    @property
    def asset_fields(self) -> DigitalAssetFields:
        return self._asset_fields.get(self._parse_asset_fields)

    def _parse_asset_fields(self) -> DigitalAssetFields:
        try:
            return DigitalAssetFields.model_validate(self.raw_fields)
        except ValidationError as e:
            logger.warning(f"Could not read digital asset fields for {self.id}: {e}")
            return DigitalAssetFields()

    @property
    def size(self) -> int | None:
        return self.asset_fields.size

    @property
    def version(self) -> str | int | None:
        return self.asset_fields.version

    @property
    def renditions(self) -> list[DigitalAssetRendition]:
        return self.asset_fields.renditions

    @property
    def native_download_url(self) -> str | None:
        return self.asset_fields.native_download_url

    @property
    def advanced_video_info(self) -> AdvancedVideoInfo | None:
        return self.asset_fields.advanced_video_info

    @property
    def advanced_video_properties(self) -> AdvancedVideoInfoProperties | None:
        info = self.advanced_video_info
        return info.properties if info is not None else None

    @property
    def video_token(self) -> str | None:
        properties = self.advanced_video_properties
        return properties.video_token if properties is not None else None

    def is_image(self) -> bool:
        return self.asset_fields.is_image()

    def is_advanced_video(self) -> bool:
        return self.advanced_video_info is not None

    def is_custom_asset_type(self) -> bool:
        return self.type not in STANDARD_ASSET_TYPES

    def get_custom_field(
        self, field_name: str, field_type: FieldType
    ) -> FieldValue | None:
        """Return an attribute field of a custom digital asset type."""
        if self.raw_fields.get(field_name) is None:
            return None
        return self.get_field(field_name, field_type)

    def get_rendition(self, name: str | RenditionType) -> DigitalAssetRendition | None:
        if isinstance(name, RenditionType):
            name = name.value
        return find_rendition(self.renditions, name)

    def get_rendition_url(self, rendition: str | RenditionType) -> str | None:
        """Return the download URL for a rendition.

        The native rendition comes from the asset's own download links.
        Any other rendition is looked up by name, and the URL of its jpg
        format (or its first format) is returned.
        """
        name = rendition.value if isinstance(rendition, RenditionType) else rendition
        if name == RenditionType.NATIVE.value:
            return self.native_download_url

        found = self.get_rendition(name)
        if found is None:
            return None
        rendition_format = found.best_matching_format("jpg")
        return rendition_format.download_url if rendition_format else None

    def get_preferred_rendition(
        self, criteria: RenditionCriteria | None = None
    ) -> RenditionFormat | None:
        return preferred_format(self.renditions, criteria or RenditionCriteria())


def deserialize_asset(data: Mapping[str, Any]) -> Asset:
    """Build a ContentItem or DigitalAsset from a decoded JSON object.

    Raises:
        pydantic.ValidationError: If the object is not a valid asset
    """
    if AssetType.from_json(data).is_digital_asset():
        return DigitalAsset.model_validate(data)
    return ContentItem.model_validate(data)


class AssetSearchResult(PaginatedListResult[Asset]):
    """A page of assets from an item search."""

    def _deserialize_item(self, raw: Any) -> Asset:
        return deserialize_asset(raw)

    def content_items(self) -> list[ContentItem]:
        return [item for item in self.items() if isinstance(item, ContentItem)]

    def digital_assets(self) -> list[DigitalAsset]:
        return [item for item in self.items() if isinstance(item, DigitalAsset)]
