import pytest

from fhirmodel.errors import DateFormatError, WrongResourceType


def test_wrong_resource_type_message():
    err = WrongResourceType("Patient", "Basic")
    assert str(err) == "The Resource is of a different type (Patient) than requested (Basic)"
    assert err.actual == "Patient"
    assert err.requested == "Basic"


def test_wrong_resource_type_is_a_type_error():
    err = WrongResourceType("Encounter", "Task")
    assert isinstance(err, TypeError)
    assert err.actual == "Encounter"
    assert err.requested == "Task"


@pytest.mark.parametrize(
    ("kind", "message"),
    [
        (DateFormatError.Kind.STRING_SPLIT, "Couldn't split string"),
        (DateFormatError.Kind.INVALID_DATE, "Invalid date format"),
    ],
)
def test_date_format_error_without_detail(kind, message):
    err = DateFormatError(kind)
    assert str(err) == message
    assert err.kind is kind
    assert err.detail is None


def test_date_format_error_with_detail():
    err = DateFormatError(DateFormatError.Kind.TIME_PARSING, "bad input")
    assert str(err) == "Couldn't parse date: bad input"


def test_date_format_error_detail_for_each_kind():
    month = DateFormatError(DateFormatError.Kind.TIME_COMPONENT_RANGE, "x")
    integer = DateFormatError(DateFormatError.Kind.INT_PARSING, "x")
    assert str(month) == "Invalid month: x"
    assert str(integer) == "Couldn't parse string to integer: x"


def test_date_format_error_is_a_value_error():
    err = DateFormatError(DateFormatError.Kind.INVALID_DATE)
    assert isinstance(err, ValueError)
    assert err.kind is DateFormatError.Kind.INVALID_DATE
    assert str(err) == "Invalid date format"