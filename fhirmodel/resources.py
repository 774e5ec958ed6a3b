"""Helpers on resources given as FHIR JSON mappings.

Covers search bundles, codeable concepts and resources with identifiers.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, MutableMapping
from typing import Any

from .versions import FhirVersion

_NEXT_RELATION = "next"


def _present(items: Any) -> Iterator[Any]:
    """Yield the entries of an optional list, skipping missing (``None``) ones."""
    for item in items or ():
        if item is not None:
            yield item


def next_page_url(bundle: Mapping[str, Any]) -> str | None:
    """Return the URL of the next page of a search result bundle, if any."""
    for link in _present(bundle.get("link")):
        if link.get("relation") == _NEXT_RELATION:
            return link.get("url")
    return None


def codes_with_system(concept: Mapping[str, Any], system: str) -> Iterator[str]:
    """Yield every code of the concept's codings that belong to ``system``."""
    for coding in _present(concept.get("coding")):
        if coding.get("system") == system:
            code = coding.get("code")
            if code is not None:
                yield code


def code_with_system(concept: Mapping[str, Any], system: str) -> str | None:
    """Return the first code of the concept that belongs to ``system``."""
    return next(codes_with_system(concept, system), None)


def _has_type_coding(identifier: Mapping[str, Any], type_system: str, type_code: str) -> bool:
    concept = identifier.get("type")
    if concept is None:
        return False
    return any(
        coding.get("system") == type_system and coding.get("code") == type_code
        for coding in _present(concept.get("coding"))
    )


class IdentifiableResource:
    """View on a resource that carries an ``identifier`` list.

    Changes go straight to the wrapped mapping.
    """

    def __init__(self, resource: MutableMapping[str, Any]) -> None:
        self.resource = resource

    def __repr__(self) -> str:
        return f"IdentifiableResource({self.resource!r})"

    @property
    def identifier(self) -> list:
        """The ``identifier`` list; empty when the field is absent."""
        return self.resource.get("identifier") or []

    @identifier.setter
    def identifier(self, value: list) -> None:
        self.resource["identifier"] = list(value)

    @property
    def identifier_ext(self) -> list:
        """The extensions of the ``identifier`` entries (``_identifier``)."""
        return self.resource.get("_identifier") or []

    @identifier_ext.setter
    def identifier_ext(self, value: list) -> None:
        self.resource["_identifier"] = list(value)

    def place_identifier(self, identifier: Mapping[str, Any]) -> bool:
        """Replace the identifier with the same system or type, or append it.

        Returns ``True`` when it was appended and ``False`` when it replaced one.
        """
        identifiers = self.resource.get("identifier")
        system = identifier.get("system")
        id_type = identifier.get("type")
        for position, existing in enumerate(identifiers or ()):
            if existing is None:
                continue
            same_system = existing.get("system") is not None and existing.get("system") == system
            same_type = existing.get("type") is not None and existing.get("type") == id_type
            if same_system or same_type:
                identifiers[position] = identifier
                return False

        if identifiers is None:
            identifiers = self.resource["identifier"] = []
        identifiers.append(identifier)
        extensions = self.resource.get("_identifier")
        if extensions and len(identifiers) == len(extensions) + 1:
            extensions.append(None)
        return True

    def identifier_with_system(self, system: str) -> str | None:
        """Return the first identifier value for ``system``."""
        for identifier in self.identifiers_with_system(system):
            value = identifier.get("value")
            if value is not None:
                return value
        return None

    def identifiers_with_system(self, system: str) -> list:
        """Return all identifiers that belong to ``system``."""
        return [
            identifier
            for identifier in _present(self.identifier)
            if identifier.get("system") == system
        ]

    def identifier_with_type(self, type_system: str, type_code: str) -> str | None:
        """Return the first identifier value whose type has the given coding."""
        for identifier in self.identifiers_with_type(type_system, type_code):
            value = identifier.get("value")
            if value is not None:
                return value
        return None

    def identifiers_with_type(self, type_system: str, type_code: str) -> list:
        """Return all identifiers whose type has the given coding."""
        return [
            identifier
            for identifier in _present(self.identifier)
            if _has_type_coding(identifier, type_system, type_code)
        ]


def as_identifiable_resource(
    resource: MutableMapping[str, Any], version=FhirVersion.R5
) -> IdentifiableResource | None:
    """Wrap the resource if its type carries identifiers in ``version``."""
    resource_type = resource.get("resourceType")
    if resource_type is None:
        raise ValueError("resource has no resourceType")
    if not FhirVersion(version).is_identifiable(resource_type):
        return None
    return IdentifiableResource(resource)