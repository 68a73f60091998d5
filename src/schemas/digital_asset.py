"""Digital asset field schemas.

A digital asset keeps its file details inside its "fields" object: the
file size and version, the "native" download links for the original
file, the list of renditions and, for hosted video, advanced video info.
"""

from pydantic import BaseModel, Field, model_validator

from content_delivery.renditions import RenditionType, best_matching_format

from .links import AssetLink, first_href

MIME_TYPE_IMAGE = "image"


def _as_int(value: str | int | None) -> int:
    if value is None or value == "":
        return 0
    try:
        return int(value)
    except ValueError:
        return 0


class DigitalAssetMetadata(BaseModel):
    """Image dimensions. The server sends them as strings."""

    width: str | int | None = None
    height: str | int | None = None

    model_config = {"extra": "allow"}

    @property
    def width_as_int(self) -> int:
        return _as_int(self.width)

    @property
    def height_as_int(self) -> int:
        return _as_int(self.height)


class RenditionFormat(BaseModel):
    """One encoded variant of a rendition."""

    format: str | None = None
    size: int | None = None
    mime_type: str | None = Field(default=None, alias="mimeType")
    metadata: DigitalAssetMetadata | None = None
    links: list[AssetLink] = []
    rendition_name: str | None = None

    model_config = {"extra": "allow", "populate_by_name": True}

    @property
    def width(self) -> int:
        return self.metadata.width_as_int if self.metadata else 0

    @property
    def height(self) -> int:
        return self.metadata.height_as_int if self.metadata else 0

    @property
    def download_url(self) -> str | None:
        return first_href(self.links)


class DigitalAssetRendition(BaseModel):
    """A named rendition of a digital asset and its formats."""

    name: str | None = None
    type: str | None = None
    formats: list[RenditionFormat] = []
    links: list[AssetLink] = []

    model_config = {"extra": "allow"}

    @model_validator(mode="after")
    def _link_formats(self) -> "DigitalAssetRendition":
        for rendition_format in self.formats:
            rendition_format.rendition_name = self.name
        return self

    @property
    def rendition_type(self) -> RenditionType:
        return RenditionType.from_name(self.name)

    def best_matching_format(self, format_name: str) -> RenditionFormat | None:
        return best_matching_format(self.formats, format_name)


class NativeLinks(BaseModel):
    """Download links for the original file."""

    links: list[AssetLink] = []


class IdObject(BaseModel):
    id: str | None = None


class AdvancedVideoInfoProperties(BaseModel):
    """Properties of a video hosted by an advanced video provider."""

    duration: int | None = None
    video_strip_properties: str | None = Field(default=None, alias="videoStripProperties")
    extension: str | None = None
    search_text: str | None = Field(default=None, alias="searchText")
    name: str | None = None
    status: str | None = None
    entry_id: str | None = Field(default=None, alias="entryId")
    endpoint: str | None = None
    partner: IdObject | None = None
    player: IdObject | None = None
    video_token: str | None = Field(default=None, alias="videoToken")

    model_config = {"extra": "allow", "populate_by_name": True}

    def is_ready(self) -> bool:
        return self.status == "READY"

    @property
    def partner_id(self) -> str | None:
        return self.partner.id if self.partner else None

    @property
    def player_id(self) -> str | None:
        return self.player.id if self.player else None


class AdvancedVideoInfo(BaseModel):
    provider: str | None = None
    properties: AdvancedVideoInfoProperties | None = None


class DigitalAssetFields(BaseModel):
    """The structured "fields" object of a digital asset."""

    metadata: DigitalAssetMetadata | None = None
    size: int | None = None
    native: NativeLinks | None = None
    renditions: list[DigitalAssetRendition] = []
    advanced_video_info: AdvancedVideoInfo | None = Field(
        default=None, alias="advancedVideoInfo"
    )
    mime_type: str | None = Field(default=None, alias="mimeType")
    version: str | int | None = None
    file_type: str | None = Field(default=None, alias="fileType")
    links: list[AssetLink] = []

    model_config = {"extra": "allow", "populate_by_name": True}

    def is_image(self) -> bool:
        return self.mime_type is not None and MIME_TYPE_IMAGE in self.mime_type

    @property
    def native_download_url(self) -> str | None:
        return first_href(self.native.links) if self.native else None
