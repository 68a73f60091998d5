"""Link and embedded list schemas shared by delivery API objects."""

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class AssetLink(BaseModel):
    """A HATEOAS link attached to a delivery API object."""

    href: str | None = None
    rel: str | None = None
    method: str | None = None
    media_type: str | None = Field(default=None, alias="mediaType")

    model_config = {"extra": "allow", "populate_by_name": True}


class ItemList(BaseModel, Generic[T]):
    """An embedded {"items": [...]} list, such as an asset's taxonomies."""

    items: list[T] = []

    def first_item(self) -> T | None:
        return self.items[0] if self.items else None


def first_href(links: list[AssetLink] | None) -> str | None:
    """Return the href of the first link, if any."""
    if links:
        return links[0].href
    return None
