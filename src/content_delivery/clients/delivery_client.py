"""Client for the published content delivery API."""

import logging
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from content_delivery.mapping import CustomItemShape, MappedItem, map_item
from content_delivery.query import field_list
from schemas.api import ApiInfo, AssetLanguageVariations
from schemas.asset import Asset, AssetSearchResult, DigitalAsset, deserialize_asset
from schemas.taxonomy import TaxonomyCategoryList, TaxonomyList

from .client import Client
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

EXPAND_ALL = "all"


class DeliveryClient(Client):
    """Client for published content items, digital assets and taxonomies.

    Responses are returned as typed models from the schemas package;
    content item fields are left raw and typed on access.

    Example:
        config = {
            "base_url": "https://example.cec.ocp.oraclecloud.com",
            "channel_token": "0123456789abcdef",
        }
        with DeliveryClient(config) as client:
            result = client.search_assets(query='type eq "Article"', limit=10)
            for item in result.items():
                print(item.get_text_field("title"))
    """

    def fetch(self, path: str, **params) -> Any:
        """GET a path below the delivery API root and decode the JSON body."""
        response = self.get(f"{self.api_path}{path}", params=params)
        return response.json()

    def _validate(self, model: type[M], data: Any) -> M:
        try:
            return model.model_validate(data)
        except PydanticValidationError as e:
            raise ValidationError(
                f"Response failed {model.__name__} validation",
                errors=[str(err) for err in e.errors()],
            ) from e

    def _asset(self, data: Any) -> Asset:
        if not isinstance(data, dict):
            raise ValidationError("Expected an item object in the response")
        try:
            return deserialize_asset(data)
        except PydanticValidationError as e:
            item_id = data.get("id", "unknown")
            raise ValidationError(
                f"Item {item_id} failed validation",
                errors=[str(err) for err in e.errors()],
            ) from e

    def get_item(
        self,
        item_id: str,
        expand: str | list[str] | None = None,
        links: str | None = None,
    ) -> Asset:
        """Fetch a content item or digital asset by id.

        Args:
            item_id: Item id
            expand: Reference field name(s) to expand, or "all"
            links: Comma-separated link relations to include

        Returns:
            A ContentItem or DigitalAsset
        """
        data = self.fetch(f"/items/{item_id}", expand=field_list(expand), links=links)
        return self._asset(data)

    def get_item_by_slug(
        self,
        slug: str,
        expand: str | list[str] | None = None,
        links: str | None = None,
    ) -> Asset:
        data = self.fetch(f"/items/.by.slug/{slug}", expand=field_list(expand), links=links)
        return self._asset(data)

    def get_digital_asset(self, asset_id: str) -> DigitalAsset:
        """Fetch a digital asset by id.

        Raises:
            ValidationError: If the id belongs to a content item
        """
        asset = self.get_item(asset_id)
        if not isinstance(asset, DigitalAsset):
            raise ValidationError(f"Item {asset_id} is not a digital asset")
        return asset

    def get_custom_item(
        self,
        item_id: str,
        shape: CustomItemShape,
        expand: str | list[str] | None = None,
    ) -> MappedItem:
        """Fetch an item and read the fields declared by shape."""
        return map_item(shape, self.get_item(item_id, expand=expand))

    def search_assets(
        self,
        query: str | None = None,
        fields: str | list[str] | None = None,
        limit: int | None = None,
        offset: int | None = None,
        order_by: str | None = None,
        total_results: bool | None = None,
        default: str | None = None,
        links: str | None = None,
    ) -> AssetSearchResult:
        """Search published items.

        Args:
            query: Search expression, see SearchQueryBuilder
            fields: Field names to return, or "all"
            limit: Page size
            offset: Index of the first item to return
            order_by: Sort expression, e.g. "name:asc"
            total_results: Ask the server to count all matches
            default: Free text search across all fields
            links: Comma-separated link relations to include

        Returns:
            A page of assets; items are deserialized on first access
        """
        data = self.fetch(
            "/items",
            q=query,
            fields=field_list(fields),
            limit=limit,
            offset=offset,
            orderBy=order_by,
            totalResults=total_results,
            default=default,
            links=links,
        )
        result = self._validate(AssetSearchResult, data)
        logger.debug(f"Search returned {len(result.raw_items)} items (hasMore={result.has_more})")
        return result

    def get_item_language_variations(self, item_id: str) -> AssetLanguageVariations:
        data = self.fetch(f"/items/{item_id}/variations/language")
        return self._validate(AssetLanguageVariations, data)

    def get_taxonomies(
        self,
        expand: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        total_results: bool | None = None,
    ) -> TaxonomyList:
        data = self.fetch(
            "/taxonomies",
            expand=expand,
            limit=limit,
            offset=offset,
            totalResults=total_results,
        )
        return self._validate(TaxonomyList, data)

    def get_taxonomy_categories(
        self,
        taxonomy_id: str,
        expand: str | None = None,
        limit: int | None = None,
        offset: int | None = None,
        total_results: bool | None = None,
    ) -> TaxonomyCategoryList:
        data = self.fetch(
            f"/taxonomies/{taxonomy_id}/categories",
            expand=expand,
            limit=limit,
            offset=offset,
            totalResults=total_results,
        )
        return self._validate(TaxonomyCategoryList, data)

    def get_api_info(self) -> ApiInfo:
        return self._validate(ApiInfo, self.fetch(""))
