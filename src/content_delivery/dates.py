"""Content date values and their display parsers.

Date fields arrive as small objects holding an ISO-8601 timestamp with
offset, the timezone name chosen by the author and an optional
human-readable description:

    {"value": "2019-02-04T13:37:22.229-05:00",
     "timezone": "America/Montreal",
     "description": "2/4/2019"}

ContentDate keeps these strings as received. Derived values (epoch
milliseconds, display strings) come from a parser, which never modifies
the date it reads.
"""

import logging
from datetime import datetime, timedelta, timezone
from enum import Enum

from pydantic import BaseModel, field_validator

logger = logging.getLogger(__name__)

DEFAULT_TIMEZONE = "UTC"

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class ContentDateDisplayType(Enum):
    """How a date is shown, keyed by the editor type of the date field.

    Output patterns are str.format templates applied to a datetime.
    """

    UNKNOWN = ("", "{0.month}/{0.day}/{0.year}")
    DATE = ("datepicker", "{0.month}/{0.day}/{0.year}")
    DATE_TIME = ("datetimepicker", "{0.month}/{0.day}/{0.year} {0:%I:%M %p}")
    DATE_TIME_ZONE = ("datetimepickertz", "{0.month}/{0.day}/{0.year} {0:%I:%M %p}")

    def __new__(cls, editor_name: str, output_pattern: str):
        member = object.__new__(cls)
        member._value_ = editor_name
        member.output_pattern = output_pattern
        return member

    @classmethod
    def from_editor(cls, name: str | None) -> "ContentDateDisplayType":
        """Match an editor type name, falling back to UNKNOWN."""
        for display_type in cls:
            if name is not None and display_type.value == name:
                return display_type
        return cls.UNKNOWN


class ContentDate(BaseModel):
    """An immutable date value from a content item field."""

    value: str | None = None
    timezone: str = DEFAULT_TIMEZONE
    description: str | None = None

    model_config = {"frozen": True, "extra": "ignore"}

    @field_validator("timezone", mode="before")
    @classmethod
    def _default_timezone(cls, value):
        return DEFAULT_TIMEZONE if value is None else value

    def parser(self) -> "ContentDateParser":
        return ContentDateParser(self)

    def legacy_parser(self) -> "LegacyContentDateParser":
        return LegacyContentDateParser(self)


class ContentDateParser:
    """Parses a ContentDate as ISO-8601, keeping the original offset."""

    def __init__(self, date: ContentDate):
        self.date = date

    def _parse(self, value: str) -> datetime:
        return datetime.fromisoformat(value)

    def as_datetime(self) -> datetime | None:
        if not self.date.value:
            return None
        try:
            return self._parse(self.date.value)
        except ValueError as e:
            logger.warning(f"Could not parse content date {self.date.value!r}: {e}")
            return None

    def time_in_milliseconds(self) -> int | None:
        parsed = self.as_datetime()
        if parsed is None:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        return (parsed - _EPOCH) // timedelta(milliseconds=1)

    def display_string(
        self,
        display_type: ContentDateDisplayType = ContentDateDisplayType.DATE,
        output_format: str | None = None,
    ) -> str | None:
        """Format the date for display.

        Args:
            display_type: Which kind of date display to produce
            output_format: str.format template overriding the display
                type's pattern, e.g. "{0:%B} {0.day}, {0.year}"

        Returns:
            The formatted string, or None when the value cannot be parsed
        """
        parsed = self.as_datetime()
        if parsed is None:
            return None

        display = (output_format or display_type.output_pattern).format(parsed)
        if display_type is ContentDateDisplayType.DATE_TIME_ZONE:
            return f"{display} {self.date.timezone}"
        return display


class LegacyContentDateParser(ContentDateParser):
    """Fixed-pattern parser that normalizes dates to UTC."""

    PARSE_FORMAT = "%Y-%m-%dT%H:%M:%S.%f%z"

    def _parse(self, value: str) -> datetime:
        return datetime.strptime(value, self.PARSE_FORMAT).astimezone(timezone.utc)
