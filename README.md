# fhirmodel

Helpers for working with FHIR data in Python, for the STU3, R4B and R5
versions of the standard. Resources are handled as plain JSON-shaped
dictionaries (as returned by `json.loads`), and the package supplies the
pieces that need real logic.

## Modules

- `fhirmodel.temporal`: the FHIR `instant`, `time`, `date` and `dateTime`
  types as `Instant`, `Time`, `Date` and `DateTime`. Each has a `parse`
  class method and a `serialize` method.
  - `Instant` wraps a timezone-aware `datetime.datetime` and reads and writes
    RFC 3339 (a zero offset is written as `Z`).
  - `Time` wraps a naive `datetime.time` and is written as `hh:mm:ss`, with a
    fractional part only when it is not zero.
  - `Date` is a year, a year and month, or a full date (`YYYY`, `YYYY-MM`,
    `YYYY-MM-DD`). Partial dates can only be written with a four-digit year.
    `Date.compare` compares at the coarsest precision the two values share and
    returns -1, 0 or 1; it also accepts a `datetime.date`. The comparison
    operators and `==` follow the same rule.
  - `DateTime` holds either a `Date` or an `Instant`; `parse` reads an instant
    when the text contains `T` and a date otherwise. `DateTime.compare` also
    accepts an aware `datetime.datetime`; a date is compared with the calendar
    date of an instant.
- `fhirmodel.primitives`: `Integer64`, a signed 64-bit integer written as a
  JSON string, and `Base64Binary`, which holds bytes and is written as padded
  standard base64 (whitespace in the input is ignored).
- `fhirmodel.errors`: `DateFormatError` (a `ValueError`, with a `kind` from
  `DateFormatError.Kind` and an optional `detail`), raised when a date, time or
  instant cannot be read, and `WrongResourceType` (a `TypeError`).
- `fhirmodel.versions`: `FhirVersion` (`STU3`, `R4B`, `R5`) with each
  version's `version` number, `json_mime_type`, `identifiable_resources`,
  `has_reference_type`, and `is_identifiable(resource_type)`.
- `fhirmodel.references`: `parse_reference` turns a reference string into a
  `LocalReference`, `RelativeReference` or `AbsoluteReference`;
  `parse_reference_field` does the same for a Reference element and returns
  `None` when its `reference` field is unset. `local_reference`,
  `relative_reference`, `local_reference_to` and `relative_reference_to` build
  Reference elements as dictionaries; the `type` field is set for R4B and R5
  only, and the `*_to` forms return `None` for a resource without an `id`.
- `fhirmodel.resources`: `next_page_url` for search-result bundles,
  `codes_with_system` and `code_with_system` for codeable concepts, and
  `IdentifiableResource` (returned by `as_identifiable_resource`, or `None`
  when the resource type has no identifiers in the given version) with
  `place_identifier`, `identifier_with_system`, `identifiers_with_system`,
  `identifier_with_type` and `identifiers_with_type`.

## Installation

```
pip install fhirmodel
```

## Example

```python
from fhirmodel.temporal import Date, DateTime
from fhirmodel.references import parse_reference, RelativeReference

birth = Date.parse("2021-02")
print(birth.serialize())                 # 2021-02
print(DateTime.parse("2021-02-01T10:00:00Z").serialize())

ref = parse_reference("Encounter/1/_history/2")
assert ref == RelativeReference(resource_type="Encounter", id="1", version_id="2")
```

```python
from fhirmodel.resources import as_identifiable_resource
from fhirmodel.versions import FhirVersion

patient = {"resourceType": "Patient", "identifier": []}
ident = as_identifiable_resource(patient, FhirVersion.R5)
ident.place_identifier({"system": "urn:example:mrn", "value": "12345"})
print(ident.identifier_with_system("urn:example:mrn"))   # 12345
```

## What it does not do

There are no classes for the individual FHIR resources and data types, no
code-system enumerations, and no validation of whole resources against the
FHIR specification. There is no client for talking to a FHIR server.

## Running the tests

```
pip install -e ".[test]"
pytest
```