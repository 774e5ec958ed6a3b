"""Exceptions raised by the FHIR model helpers."""

from __future__ import annotations

import enum


class WrongResourceType(TypeError):
    """A resource is of a different type than the one requested."""

    def __init__(self, actual: str, requested: str) -> None:
        super().__init__(actual, requested)
        self.actual = actual
        self.requested = requested

    def __str__(self) -> str:
        return (
            f"The Resource is of a different type ({self.actual}) "
            f"than requested ({self.requested})"
        )


class DateFormatError(ValueError):
    """A string could not be turned into a FHIR date, time or instant."""

    class Kind(enum.Enum):
        """What went wrong while reading the value."""

        TIME_PARSING = "Couldn't parse date"
        TIME_COMPONENT_RANGE = "Invalid month"
        INT_PARSING = "Couldn't parse string to integer"
        STRING_SPLIT = "Couldn't split string"
        INVALID_DATE = "Invalid date format"

    def __init__(self, kind: DateFormatError.Kind, detail: str | None = None) -> None:
        super().__init__(kind, detail)
        self.kind = kind
        self.detail = detail

    def __str__(self) -> str:
        if self.detail is None:
            return self.kind.value
        return f"{self.kind.value}: {self.detail}"