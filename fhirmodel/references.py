"""Parsing and building of FHIR references."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Union

from .versions import FhirVersion, resource_type_name


@dataclass(frozen=True)
class LocalReference:
    """Reference to a resource in the ``contained`` field of the referrer."""

    id: str

    @property
    def resource_type(self) -> None:
        """Local references do not show the resource type."""
        return None


@dataclass(frozen=True)
class RelativeReference:
    """Reference to a resource on the same FHIR server."""

    resource_type: str
    id: str
    version_id: str | None = None


@dataclass(frozen=True)
class AbsoluteReference:
    """Reference by absolute URL or URI.

    ``resource_type`` and ``id`` are just the positional URL segments and may be
    wrong when the URL does not point to a FHIR server.
    """

    url: str
    resource_type: str | None = None
    id: str | None = None


ParsedReference = Union[LocalReference, RelativeReference, AbsoluteReference]


def _parse_segments(reference: str) -> tuple[str, str, str | None, bool] | None:
    """Split off resource type, id and version id, and tell whether more is left."""
    segments = iter(reversed(reference.split("/")))
    id_or_version = next(segments, None)
    history_or_type = next(segments, None)
    if id_or_version is None or history_or_type is None:
        return None
    if history_or_type == "_history":
        ident = next(segments, None)
        resource_type = next(segments, None)
        if ident is None or resource_type is None:
            return None
        return resource_type, ident, id_or_version, next(segments, None) is not None
    return history_or_type, id_or_version, None, next(segments, None) is not None


def parse_reference(reference: str) -> ParsedReference:
    """Classify a reference string as local, relative or absolute."""
    if reference.startswith("#"):
        return LocalReference(reference[1:])
    parts = _parse_segments(reference)
    if parts is None:
        return AbsoluteReference(reference)
    resource_type, ident, version_id, is_absolute = parts
    if is_absolute:
        return AbsoluteReference(reference, resource_type, ident)
    return RelativeReference(resource_type, ident, version_id)


def parse_reference_field(reference: Mapping[str, Any]) -> ParsedReference | None:
    """Parse the ``reference`` field of a Reference; ``None`` if it is not set."""
    url = reference.get("reference")
    if url is None:
        return None
    return parse_reference(url)


def _make_reference(
    reference: str, resource_type, version: FhirVersion
) -> dict[str, str]:
    version = FhirVersion(version)
    result = {"reference": reference}
    if version.has_reference_type:
        result["type"] = resource_type_name(resource_type)
    return result


def _type_and_id(resource: Mapping[str, Any]) -> tuple[str, str | None]:
    resource_type = resource.get("resourceType")
    if resource_type is None:
        raise ValueError("resource has no resourceType")
    return resource_type, resource.get("id")


def local_reference(resource_type, id: str, version=FhirVersion.R5) -> dict[str, str]:
    """Build a local Reference; the target must go into ``contained``."""
    return _make_reference(f"#{id}", resource_type, version)


def local_reference_to(
    resource: Mapping[str, Any], version=FhirVersion.R5
) -> dict[str, str] | None:
    """Build a local Reference to a resource; ``None`` if it has no id."""
    resource_type, ident = _type_and_id(resource)
    if ident is None:
        return None
    return local_reference(resource_type, ident, version)


def relative_reference(resource_type, id: str, version=FhirVersion.R5) -> dict[str, str]:
    """Build a relative Reference of the form ``Type/id``."""
    name = resource_type_name(resource_type)
    return _make_reference(f"{name}/{id}", name, version)


def relative_reference_to(
    resource: Mapping[str, Any], version=FhirVersion.R5
) -> dict[str, str] | None:
    """Build a relative Reference to a resource; ``None`` if it has no id."""
    resource_type, ident = _type_and_id(resource)
    if ident is None:
        return None
    return relative_reference(resource_type, ident, version)