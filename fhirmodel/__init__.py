"""FHIR helpers: temporal types, primitives, versions, references, identifiers and bundles."""

__version__ = "0.12.0"
__all__ = ["errors", "primitives", "temporal", "versions", "references", "resources"]