"""Schema definitions for the content delivery API."""

from .api import ApiInfo, AssetLanguageVariations, ErrorDetail, LanguageVariation
from .asset import (
    Asset,
    AssetKind,
    AssetSearchResult,
    AssetType,
    ContentItem,
    DigitalAsset,
    deserialize_asset,
)
from .digital_asset import (
    AdvancedVideoInfo,
    AdvancedVideoInfoProperties,
    DigitalAssetFields,
    DigitalAssetMetadata,
    DigitalAssetRendition,
    RenditionFormat,
)
from .links import AssetLink, ItemList
from .taxonomy import Taxonomy, TaxonomyCategory, TaxonomyCategoryList, TaxonomyList

__all__ = [
    "AdvancedVideoInfo",
    "AdvancedVideoInfoProperties",
    "ApiInfo",
    "Asset",
    "AssetKind",
    "AssetLanguageVariations",
    "AssetLink",
    "AssetSearchResult",
    "AssetType",
    "ContentItem",
    "DigitalAsset",
    "DigitalAssetFields",
    "DigitalAssetMetadata",
    "DigitalAssetRendition",
    "ErrorDetail",
    "ItemList",
    "LanguageVariation",
    "RenditionFormat",
    "Taxonomy",
    "TaxonomyCategory",
    "TaxonomyCategoryList",
    "TaxonomyList",
    "deserialize_asset",
]
