"""Schemas for API information and item language variations."""

from pydantic import BaseModel, Field

from .links import AssetLink


class ApiCatalog(BaseModel):
    links: list[AssetLink] = []

    model_config = {"extra": "allow"}


class ApiInfo(BaseModel):
    """Description of the delivery API version, e.g. "v1.1"."""

    version: str | None = None
    lifecycle: str | None = None
    is_latest: bool | None = Field(default=None, alias="isLatest")
    catalog: ApiCatalog | None = None
    links: list[AssetLink] = []

    model_config = {"extra": "allow", "populate_by_name": True}


class LanguageVariation(BaseModel):
    """One language of an item. value is the language code, e.g. "fr-FR"."""

    id: str | None = None
    value: str | None = None
    links: list[AssetLink] = []


class AssetLanguageVariations(BaseModel):
    """The set of translations an item belongs to."""

    set_id: str | None = Field(default=None, alias="setId")
    master_item: str | None = Field(default=None, alias="masterItem")
    var_type: str | None = Field(default=None, alias="varType")
    items: list[LanguageVariation] = []
    links: list[AssetLink] = []

    model_config = {"extra": "allow", "populate_by_name": True}

    def language_ids(self) -> dict[str, str]:
        """Map each language code to the id of the item in that language."""
        return {
            variation.value: variation.id
            for variation in self.items
            if variation.value is not None and variation.id is not None
        }


class ErrorDetail(BaseModel):
    """Error body returned by the delivery API with a non-2xx status."""

    title: str | None = None
    detail: str | None = None
    status: int | None = None
    type: str | None = None
    error_code: str | None = Field(default=None, alias="o:errorCode")

    model_config = {"extra": "allow", "populate_by_name": True}
