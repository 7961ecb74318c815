import pytest

from errors import ConflictError, NotFoundError, ValidationError
from services.validation import (
    CheckContext,
    body_data_has,
    body_id_matches_route,
    is_positive_int,
    is_present,
    record_exists,
    request_data,
    run_checks,
)


@pytest.mark.parametrize("value", ["x", 1, -1, [], {}, True, 0.5])
def test_is_present(value):
    assert is_present(value)


@pytest.mark.parametrize("value", [None, "", 0, 0.0, False])
def test_is_not_present(value):
    assert not is_present(value)


@pytest.mark.parametrize("value", [1, 2, 100])
def test_is_positive_int(value):
    assert is_positive_int(value)


@pytest.mark.parametrize("value", [0, -2, 1.0, "3", None, True])
def test_is_not_positive_int(value):
    assert not is_positive_int(value)


def test_request_data_unwraps_envelope():
    assert request_data({"data": {"a": 1}}) == {"a": 1}


@pytest.mark.parametrize("payload", [None, {}, {"data": None}])
def test_request_data_defaults_to_empty(payload):
    assert request_data(payload) == {}


@pytest.mark.parametrize("payload", [[1], {"data": [1]}, {"data": "x"}])
def test_request_data_rejects_non_objects(payload):
    with pytest.raises(ValidationError):
        request_data(payload)


def test_body_data_has_checks_type():
    check = body_data_has("Order", "deliverTo", str)

    assert check(CheckContext(data={"deliverTo": "home"})) is None
    error = check(CheckContext(data={"deliverTo": 42}))
    assert isinstance(error, ValidationError)
    assert error.message == "Order must include a deliverTo"
    assert error.status_code == 400


def test_record_exists():
    check = record_exists("Order")

    assert check(CheckContext(data={}, route_id="1", record={"id": "1"})) is None
    error = check(CheckContext(data={}, route_id="999"))
    assert isinstance(error, NotFoundError)
    assert error.status_code == 404
    assert error.message == "Order does not exist: 999."


def test_body_id_matches_route():
    check = body_id_matches_route("Order")

    assert check(CheckContext(data={}, route_id="1")) is None
    assert check(CheckContext(data={"id": "1"}, route_id="1")) is None
    error = check(CheckContext(data={"id": "2"}, route_id="1"))
    assert isinstance(error, ConflictError)
    assert error.status_code == 400


def test_run_checks_stops_at_first_error():
    calls = []

    def passing(context):
        calls.append("passing")
        return None

    def failing(context):
        calls.append("failing")
        return ValidationError("first")

    def never(context):
        calls.append("never")
        return ValidationError("second")

    with pytest.raises(ValidationError, match="first"):
        run_checks([passing, failing, never], CheckContext(data={}))
    assert calls == ["passing", "failing"]


def test_run_checks_passes_when_all_pass():
    run_checks([lambda context: None], CheckContext(data={}))
