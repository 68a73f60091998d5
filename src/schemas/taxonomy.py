"""Taxonomy schemas."""

from typing import Any

from pydantic import BaseModel, Field

from content_delivery.pagination import PaginatedListResult

from .links import AssetLink, ItemList


class TaxonomyCategoryNode(BaseModel):
    """One node on the path from a taxonomy root to a category."""

    id: str | None = None
    name: str | None = None


class TaxonomyCategory(BaseModel):
    """A category within a taxonomy."""

    id: str | None = None
    name: str | None = None
    nodes: list[TaxonomyCategoryNode] = []
    links: list[AssetLink] = []

    model_config = {"extra": "allow"}


class Taxonomy(BaseModel):
    """A published taxonomy, optionally with its categories expanded."""

    id: str | None = None
    name: str | None = None
    short_name: str | None = Field(default=None, alias="shortName")
    categories: ItemList[TaxonomyCategory] | None = None
    links: list[AssetLink] = []

    model_config = {"extra": "allow", "populate_by_name": True}


class TaxonomyList(PaginatedListResult[Taxonomy]):
    """A page of taxonomies."""

    def _deserialize_item(self, raw: Any) -> Taxonomy:
        return Taxonomy.model_validate(raw)


class TaxonomyCategoryList(PaginatedListResult[TaxonomyCategory]):
    """A page of categories of one taxonomy."""

    def _deserialize_item(self, raw: Any) -> TaxonomyCategory:
        return TaxonomyCategory.model_validate(raw)
