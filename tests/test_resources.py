import json

import pytest

from fhirmodel.resources import (
    IdentifiableResource,
    as_identifiable_resource,
    code_with_system,
    codes_with_system,
    next_page_url,
)
from fhirmodel.versions import FhirVersion

BUNDLE_SEARCH_RESULT_EXAMPLE = """
{
    "resourceType" : "Bundle",
    "id" : "bundle-example",
    "meta" : {"lastUpdated" : "2014-08-18T01:43:30Z"},
    "type" : "searchset",
    "total" : 3,
    "link" : [{
        "relation" : "self",
        "url" : "https://example.com/base/MedicationRequest?patient=347&_include=MedicationRequest.medication&_count=2"
    },
    {
        "relation" : "next",
        "url" : "https://example.com/base/MedicationRequest?patient=347&searchId=ff15fd40-ff71-4b48-b366-09c706bed9d0&page=2"
    }],
    "entry" : [{
        "fullUrl" : "https://example.com/base/MedicationRequest/3123",
        "resource" : {
            "resourceType" : "MedicationRequest",
            "id" : "3123",
            "status" : "unknown",
            "intent" : "order",
            "subject" : {"reference" : "Patient/347"}
        },
        "search" : {"mode" : "match", "score" : 1}
    },
    {
        "fullUrl" : "https://example.com/base/Medication/example",
        "resource" : {"resourceType" : "Medication", "id" : "example"},
        "search" : {"mode" : "include"}
    }]
}
"""

ALL_VERSIONS = [FhirVersion.STU3, FhirVersion.R4B, FhirVersion.R5]


def test_bundle_next_page_url():
    bundle = json.loads(BUNDLE_SEARCH_RESULT_EXAMPLE)
    assert next_page_url(bundle) == (
        "https://example.com/base/MedicationRequest?patient=347"
        "&searchId=ff15fd40-ff71-4b48-b366-09c706bed9d0&page=2"
    )


def test_bundle_without_next_link():
    bundle = {"resourceType": "Bundle", "link": [None, {"relation": "self", "url": "x"}]}
    assert next_page_url(bundle) is None
    assert next_page_url({"resourceType": "Bundle"}) is None


def _concept():
    return {
        "coding": [
            {"system": "system1", "code": "code1"},
            {"system": "system2", "code": "code2"},
            {"system": "system3", "code": "code3"},
            {"system": "system1", "code": "code4"},
        ]
    }


def test_codeable_concept():
    concept = _concept()
    codes1 = codes_with_system(concept, "system1")
    assert next(codes1, None) == "code1"
    assert next(codes1, None) == "code4"
    assert next(codes1, None) is None
    assert code_with_system(concept, "system3") == "code3"


def test_codeable_concept_skips_missing():
    concept = {"coding": [None, {"system": "s"}, {"system": "s", "code": "c"}]}
    assert list(codes_with_system(concept, "s")) == ["c"]
    assert code_with_system(concept, "other") is None
    assert code_with_system({}, "s") is None


@pytest.mark.parametrize("version", ALL_VERSIONS)
def test_identifiable_resource(version):
    patient = {
        "resourceType": "Patient",
        "identifier": [{"system": "system", "value": "bla"}],
    }
    view = as_identifiable_resource(patient, version)
    assert isinstance(view, IdentifiableResource)
    assert view.identifier[0]["system"] == "system"


@pytest.mark.parametrize("version", ALL_VERSIONS)
def test_not_identifiable(version):
    assert as_identifiable_resource({"resourceType": "Bundle"}, version) is None
    assert as_identifiable_resource({"resourceType": "OperationOutcome"}, version) is None


def test_version_specific_identifiable():
    resource = {"resourceType": "RequestOrchestration"}
    assert as_identifiable_resource(resource, FhirVersion.R5) is not None
    assert as_identifiable_resource(resource, FhirVersion.R4B) is None


def test_missing_resource_type():
    with pytest.raises(ValueError):
        as_identifiable_resource({"id": "1"})


def _search_patient():
    return IdentifiableResource(
        {
            "resourceType": "Patient",
            "identifier": [
                {"system": "system1", "value": "bla1"},
                {
                    "type": {"coding": [{"system": "system2", "code": "code2"}]},
                    "value": "bla2",
                },
            ],
        }
    )


def test_identifier_search():
    patient = _search_patient()
    assert patient.identifier_with_system("system1") == "bla1"
    assert patient.identifier_with_type("system2", "code2") == "bla2"
    assert patient.identifier_with_system("system2") is None
    assert patient.identifier_with_type("system2", "other") is None


def test_identifiers_lists():
    patient = _search_patient()
    assert patient.identifiers_with_system("system1") == [{"system": "system1", "value": "bla1"}]
    assert [i["value"] for i in patient.identifiers_with_type("system2", "code2")] == ["bla2"]
    assert patient.identifiers_with_system("nope") == []


def test_identifier_with_system_skips_valueless():
    patient = IdentifiableResource(
        {
            "resourceType": "Patient",
            "identifier": [None, {"system": "s"}, {"system": "s", "value": "v"}],
        }
    )
    assert patient.identifier_with_system("s") == "v"


def test_place_identifier_replaces_by_system():
    resource = {"resourceType": "Patient", "identifier": [{"system": "s", "value": "old"}]}
    view = IdentifiableResource(resource)
    assert view.place_identifier({"system": "s", "value": "new"}) is False
    assert resource["identifier"] == [{"system": "s", "value": "new"}]


def test_place_identifier_replaces_by_type():
    id_type = {"coding": [{"system": "t", "code": "c"}]}
    resource = {"resourceType": "Patient", "identifier": [{"type": id_type, "value": "old"}]}
    view = IdentifiableResource(resource)
    assert view.place_identifier({"type": id_type, "value": "new"}) is False
    assert resource["identifier"] == [{"type": id_type, "value": "new"}]


def test_place_identifier_appends():
    resource = {"resourceType": "Patient"}
    view = IdentifiableResource(resource)
    assert view.place_identifier({"system": "a", "value": "1"}) is True
    assert view.place_identifier({"system": "b", "value": "2"}) is True
    assert [i["system"] for i in resource["identifier"]] == ["a", "b"]
    assert "_identifier" not in resource


def test_place_identifier_keeps_extensions_aligned():
    extension = {"extension": [{"url": "x", "valueString": "y"}]}
    resource = {
        "resourceType": "Patient",
        "identifier": [{"system": "a", "value": "1"}],
        "_identifier": [extension],
    }
    view = IdentifiableResource(resource)
    assert view.place_identifier({"system": "b", "value": "2"}) is True
    assert resource["_identifier"] == [extension, None]
    assert len(view.identifier) == len(view.identifier_ext)


def test_identifier_setters():
    resource = {"resourceType": "Patient"}
    view = IdentifiableResource(resource)
    assert view.identifier == []
    view.identifier = [{"system": "s", "value": "v"}]
    view.identifier_ext = [None]
    assert resource["identifier"] == [{"system": "s", "value": "v"}]
    assert resource["_identifier"] == [None]