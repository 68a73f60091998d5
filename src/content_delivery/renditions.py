"""Rendition and format selection for digital assets.

A digital asset is available as a list of named renditions ("Thumbnail",
"Medium", custom names), and each rendition in one or more formats (jpg,
webp, ...). The functions here pick a format out of those lists; the
rendition models themselves live in schemas.digital_asset.
"""

import logging
from collections.abc import Sequence
from enum import Enum
from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from schemas.digital_asset import DigitalAssetRendition, RenditionFormat

logger = logging.getLogger(__name__)

DEFAULT_FORMAT = "jpg"


class RenditionType(Enum):
    """Standard rendition names. NATIVE is the original uploaded file."""

    NATIVE = "native"
    THUMBNAIL = "Thumbnail"
    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"
    STRIP = "Strip"
    UNKNOWN = ""

    @classmethod
    def from_name(cls, name: str | None) -> "RenditionType":
        for rendition in cls:
            if rendition.value == name:
                return rendition
        return cls.UNKNOWN


class RenditionCriteria(BaseModel):
    """What preferred_format() should look for.

    By default the search is for the smallest rendition in jpg format.
    A minimum width/height makes the smallest search skip renditions
    that are not above that size; a maximum does the same for the
    largest search.

    With compare_to_best set, each candidate is compared against the
    best rendition found so far and must be smaller (or larger) in both
    dimensions. Otherwise candidates are compared against the first
    rendition and need only be smaller (or larger) in one dimension.
    """

    desired_format: str = DEFAULT_FORMAT
    search_for_smallest: bool = True
    search_for_largest: bool = False
    min_width: int = 0
    min_height: int = 0
    max_width: int = 0
    max_height: int = 0
    compare_to_best: bool = False

    @classmethod
    def smallest(
        cls,
        min_width: int = 0,
        min_height: int = 0,
        desired_format: str = DEFAULT_FORMAT,
        compare_to_best: bool = False,
    ) -> "RenditionCriteria":
        return cls(
            desired_format=desired_format,
            search_for_smallest=True,
            search_for_largest=False,
            min_width=min_width,
            min_height=min_height,
            compare_to_best=compare_to_best,
        )

    @classmethod
    def largest(
        cls,
        max_width: int = 0,
        max_height: int = 0,
        desired_format: str = DEFAULT_FORMAT,
        compare_to_best: bool = False,
    ) -> "RenditionCriteria":
        return cls(
            desired_format=desired_format,
            search_for_smallest=False,
            search_for_largest=True,
            max_width=max_width,
            max_height=max_height,
            compare_to_best=compare_to_best,
        )

    @property
    def has_minimum(self) -> bool:
        return self.min_width > 0 or self.min_height > 0

    @property
    def has_maximum(self) -> bool:
        return self.max_width > 0 or self.max_height > 0

    def above_minimum(self, rendition_format: "RenditionFormat") -> bool:
        return (
            rendition_format.width > self.min_width
            and rendition_format.height > self.min_height
        )

    def below_maximum(self, rendition_format: "RenditionFormat") -> bool:
        # an unset maximum dimension does not limit that dimension
        return (self.max_width == 0 or rendition_format.width < self.max_width) and (
            self.max_height == 0 or rendition_format.height < self.max_height
        )


def best_matching_format(
    formats: Sequence["RenditionFormat"] | None, format_name: str
) -> "RenditionFormat | None":
    """Return the first format named format_name, else the first format.

    Returns None only when there are no formats.
    """
    if not formats:
        return None
    for rendition_format in formats:
        if rendition_format.format == format_name:
            return rendition_format
    return formats[0]


def find_rendition(
    renditions: Sequence["DigitalAssetRendition"] | None, name: str
) -> "DigitalAssetRendition | None":
    for rendition in renditions or []:
        if rendition.name == name:
            return rendition
    return None


def preferred_format(
    renditions: Sequence["DigitalAssetRendition"] | None,
    criteria: RenditionCriteria,
) -> "RenditionFormat | None":
    """Pick the rendition format that best fits the size criteria.

    Args:
        renditions: Renditions of a digital asset, in server order
        criteria: Size and format criteria

    Returns:
        The chosen format, or None if there are no renditions
    """
    candidates = [
        rendition_format
        for rendition_format in (
            best_matching_format(rendition.formats, criteria.desired_format)
            for rendition in renditions or []
        )
        if rendition_format is not None
    ]
    if not candidates:
        return None

    if criteria.compare_to_best:
        return _compare_to_best(candidates, criteria)
    return _compare_to_first(candidates, criteria)


def _compare_to_first(
    candidates: list["RenditionFormat"], criteria: RenditionCriteria
) -> "RenditionFormat":
    first = candidates[0]
    best = first

    for candidate in candidates[1:]:
        if criteria.search_for_smallest:
            if not criteria.has_minimum:
                if candidate.width <= first.width or candidate.height <= first.height:
                    best = candidate
            elif criteria.above_minimum(candidate):
                best = candidate
        elif criteria.search_for_largest:
            if not criteria.has_maximum:
                if candidate.width >= first.width or candidate.height >= first.height:
                    best = candidate
            elif criteria.below_maximum(candidate):
                best = candidate

    return best


def _compare_to_best(
    candidates: list["RenditionFormat"], criteria: RenditionCriteria
) -> "RenditionFormat | None":
    best = None

    for candidate in candidates:
        if criteria.search_for_smallest:
            if criteria.has_minimum and not criteria.above_minimum(candidate):
                continue
            if best is None or (
                candidate.width <= best.width and candidate.height <= best.height
            ):
                best = candidate
        elif criteria.search_for_largest:
            if criteria.has_maximum and not criteria.below_maximum(candidate):
                continue
            if best is None or (
                candidate.width >= best.width and candidate.height >= best.height
            ):
                best = candidate

    if best is None:
        logger.warning("No rendition satisfies the preferred rendition criteria")
    return best
