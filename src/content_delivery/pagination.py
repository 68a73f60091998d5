"""Lazily deserialized paginated list results."""

import logging
from abc import abstractmethod
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field, PrivateAttr

from content_delivery.once import Once

logger = logging.getLogger(__name__)

T = TypeVar("T")


class PaginatedListResult(BaseModel, Generic[T]):
    """One page of a list endpoint response.

    The raw item objects are kept as received. They are converted into
    typed items the first time items() is called, and that list is
    returned on every later call. An item that fails to deserialize is
    logged and left out; it does not fail the page.

    Subclasses implement _deserialize_item() for their item type.
    """

    has_more: bool | None = Field(default=None, alias="hasMore")
    offset: int | None = None
    count: int | None = None
    limit: int | None = None
    total_results: int | None = Field(default=None, alias="totalResults")
    raw_items: list[Any] = Field(default_factory=list, alias="items")
    links: list[dict[str, Any]] = []

    model_config = {"extra": "allow", "populate_by_name": True}

    _items: Once = PrivateAttr(default_factory=Once)

    def __copy__(self):
        copied = super().__copy__()
        copied._items = Once()
        return copied

    @abstractmethod
    def _deserialize_item(self, raw: Any) -> T | None:
        """Convert one raw list element into a typed item."""

    def items(self) -> list[T]:
        return self._items.get(self._deserialize_items)

    def first(self) -> T | None:
        items = self.items()
        return items[0] if items else None

    def is_empty(self) -> bool:
        return not self.items()

    def _deserialize_items(self) -> list[T]:
        items: list[T] = []
        for index, raw in enumerate(self.raw_items):
            try:
                item = self._deserialize_item(raw)
            except Exception as e:
                logger.error(
                    f"Error deserializing item {index} of {type(self).__name__}: {e}"
                )
                continue
            if item is not None:
                items.append(item)
        return items
