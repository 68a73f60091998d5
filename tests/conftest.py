"""Pytest fixtures for content delivery tests."""

import copy

import pytest


@pytest.fixture
def sample_content_item():
    """Sample content item as returned by the items endpoint.

    Covers one field of each type the delivery API sends.
    """
    return {
        "id": "CORE1234567890ABCDEF",
        "type": "Article",
        "typeCategory": "ContentItemType",
        "name": "Spring Launch",
        "description": "Announcement article",
        "slug": "spring-launch",
        "language": "en-US",
        "translatable": True,
        "mimeType": "contentItem",
        "fileGroup": "contentItem",
        "fileExtension": "contentItem",
        "createdDate": {
            "value": "2019-02-04T13:37:22.229-05:00",
            "timezone": "America/Montreal",
        },
        "updatedDate": {
            "value": "2019-02-05T09:00:00.000Z",
            "timezone": "UTC",
        },
        "taxonomies": {
            "items": [
                {
                    "id": "TAX1",
                    "name": "Topics",
                    "shortName": "TOP",
                    "categories": {
                        "items": [
                            {
                                "id": "CAT1",
                                "name": "News",
                                "nodes": [{"id": "CAT1", "name": "News"}],
                            }
                        ]
                    },
                }
            ]
        },
        "fields": {
            "title": "Spring Launch",
            "body": "<!DOCTYPE html><html><body><p>Hello</p></body></html>",
            "views": 12345.0,
            "rating": 4.5,
            "featured": True,
            "publish_date": {
                "value": "2019-02-19T00:00:00.000-08:00",
                "timezone": "America/Los_Angeles",
                "description": "2/19/2019",
            },
            "settings": {"layout": "wide", "columns": 2},
            "keywords": ["launch", "spring"],
            "author": {
                "id": "COREAUTHOR01",
                "type": "Author",
                "typeCategory": "ContentItemType",
                "name": "Jane Smith",
            },
            "hero_image": {
                "id": "CONT0000000000IMAGE",
                "type": "Image",
                "typeCategory": "DigitalAssetType",
                "name": "hero.jpg",
            },
            "related": [
                {"id": "CORERELATED01", "type": "Article", "name": "Winter Recap"},
                {"id": "CONTRELATEDIMG", "type": "DigitalAsset", "name": "recap.png"},
            ],
            "summary": None,
            "sidebar": None,
        },
        "links": [
            {
                "href": "https://example.com/content/published/api/v1.1/items/CORE1234567890ABCDEF",
                "rel": "self",
                "method": "GET",
                "mediaType": "application/json",
            }
        ],
    }


def make_format(name, width, height, href=None):
    """Build a rendition format object."""
    return {
        "format": name,
        "size": width * height,
        "mimeType": f"image/{name}",
        "metadata": {"width": str(width), "height": str(height)},
        "links": [
            {
                "href": href or f"https://example.com/renditions/{name}/{width}x{height}",
                "rel": "self",
                "method": "GET",
            }
        ],
    }


@pytest.fixture
def sample_digital_asset():
    """Sample image asset with native links and three renditions."""
    return {
        "id": "CONT0000000000IMAGE",
        "type": "Image",
        "typeCategory": "DigitalAssetType",
        "name": "hero.jpg",
        "description": "Hero image",
        "mimeType": "image/jpeg",
        "fileGroup": "Images",
        "fileExtension": "jpg",
        "createdDate": {"value": "2019-02-04T13:37:22.229Z", "timezone": "UTC"},
        "updatedDate": {"value": "2019-02-04T13:37:22.229Z", "timezone": "UTC"},
        "fields": {
            "size": 204800,
            "version": "2",
            "mimeType": "image/jpeg",
            "fileType": "jpg",
            "metadata": {"width": "1600", "height": "1200"},
            "native": {
                "links": [
                    {
                        "href": "https://example.com/assets/CONT0000000000IMAGE/native/hero.jpg",
                        "rel": "self",
                        "method": "GET",
                    }
                ]
            },
            "renditions": [
                {
                    "name": "Thumbnail",
                    "type": "system",
                    "formats": [
                        make_format("webp", 150, 112),
                        make_format("jpg", 150, 112),
                    ],
                },
                {
                    "name": "Small",
                    "type": "system",
                    "formats": [make_format("jpg", 300, 225)],
                },
                {
                    "name": "Medium",
                    "type": "system",
                    "formats": [
                        make_format("jpg", 800, 600),
                        make_format("webp", 800, 600),
                    ],
                },
                {
                    "name": "Large",
                    "type": "system",
                    "formats": [make_format("png", 1200, 900)],
                },
            ],
            "photographer": "Ansel",
            "exposure": 0.5,
        },
    }


@pytest.fixture
def sample_search_response(sample_content_item, sample_digital_asset):
    """Sample items endpoint response with one item of each kind."""
    return {
        "hasMore": True,
        "offset": 0,
        "count": 2,
        "limit": 2,
        "totalResults": 5,
        "items": [
            copy.deepcopy(sample_content_item),
            copy.deepcopy(sample_digital_asset),
        ],
        "links": [],
    }
