"""
Tests for request validation: tagged results, field precedence, normalization
"""
import pytest

from ia_console.models.log_record import LogAction
from ia_console.services.validator import validate_generation, validate_log_create


def _payload(**overrides):
    body = {"hrId": "HR1", "userId": "U1", "action": "Punishment", "offenseIds": [], "useAi": False}
    body.update(overrides)
    return body


def test_valid_request_is_typed():
    result = validate_generation(_payload(offenseIds=[3, 1, 3], ticketNumber="42", notes="late"))
    assert result.ok
    req = result.value
    assert req.hr_id == "HR1"
    assert req.user_id == "U1"
    assert req.action is LogAction.PUNISHMENT
    assert req.offense_ids == [3, 1, 3]
    assert req.ticket_number == "42"
    assert req.notes == "late"
    assert req.use_ai is False


def test_optional_fields_default_to_absent():
    result = validate_generation({"hrId": "HR1", "userId": "U1", "action": "Revoke"})
    assert result.ok
    req = result.value
    assert req.ticket_number is None
    assert req.duration is None
    assert req.notes is None
    assert req.offense_ids == []
    assert req.use_ai is False


def test_null_and_blank_optionals_are_absent():
    result = validate_generation(_payload(ticketNumber=None, duration="   ", notes=""))
    assert result.ok
    assert result.value.ticket_number is None
    assert result.value.duration is None
    assert result.value.notes is None


@pytest.mark.parametrize("field", ["hrId", "userId"])
@pytest.mark.parametrize("bad", ["", "   "])
def test_empty_identifier_fails_on_that_field(field, bad):
    result = validate_generation(_payload(**{field: bad}))
    assert not result.ok
    assert result.error.field == field
    assert result.error.message == f"{field} is required"


@pytest.mark.parametrize("field", ["hrId", "userId", "action"])
def test_missing_required_field(field):
    body = _payload()
    del body[field]
    result = validate_generation(body)
    assert not result.ok
    assert result.error.field == field


def test_unknown_action_rejected():
    result = validate_generation(_payload(action="Ban"))
    assert not result.ok
    assert result.error.field == "action"


@pytest.mark.parametrize("ids", [["1", "2"], [1, True], "1,2", [1.5], None])
def test_offense_ids_must_be_integers(ids):
    result = validate_generation(_payload(offenseIds=ids))
    assert not result.ok
    assert result.error.field == "offenseIds"


def test_first_error_follows_fixed_precedence():
    body = {"hrId": "", "userId": "", "action": "Nope", "offenseIds": ["x"]}
    for _ in range(5):
        result = validate_generation(body)
        assert result.error.field == "hrId"

    result = validate_generation({"hrId": "HR1", "userId": "", "action": "Nope", "offenseIds": ["x"]})
    assert result.error.field == "userId"

    result = validate_generation({"offenseIds": ["x"], "action": "Nope", "hrId": "HR1", "userId": "U1"})
    assert result.error.field == "action"


def test_key_order_does_not_change_reported_field():
    a = validate_generation({"offenseIds": "bad", "userId": "", "hrId": "HR1", "action": "Punishment"})
    b = validate_generation({"hrId": "HR1", "action": "Punishment", "userId": "", "offenseIds": "bad"})
    assert a.error == b.error
    assert a.error.field == "userId"


def test_use_ai_must_be_boolean():
    result = validate_generation(_payload(useAi="yes"))
    assert not result.ok
    assert result.error.field == "useAi"


@pytest.mark.parametrize("raw", [None, [], "hrId=HR1", 42])
def test_non_object_body(raw):
    result = validate_generation(raw)
    assert not result.ok
    assert result.error.field == "body"


def test_log_create_accepts_record_shape():
    result = validate_log_create({
        "hrId": "HR9",
        "userId": "U9",
        "action": "Revoke",
        "offenses": ["0.1", "2.3"],
        "generatedMessage": "text",
    })
    assert result.ok
    assert result.value.offenses == ["0.1", "2.3"]
    assert result.value.generated_message == "text"


def test_log_create_rejects_non_string_codes():
    result = validate_log_create({"hrId": "HR9", "userId": "U9", "action": "Revoke", "offenses": [1]})
    assert not result.ok
    assert result.error.field == "offenses"


@pytest.mark.parametrize("field", ["hrId", "userId", "ticketNumber", "duration"])
def test_overlong_identifier_rejected(field):
    result = validate_generation(_payload(**{field: "x" * 129}))
    assert not result.ok
    assert result.error.field == field
    assert result.error.message == f"{field} must be at most 128 characters"


def test_identifier_at_column_width_accepted():
    result = validate_generation(_payload(hrId="h" * 128, duration="d" * 128))
    assert result.ok


def test_log_create_rejects_overlong_user_id():
    result = validate_log_create({"hrId": "HR9", "userId": "u" * 200, "action": "Revoke"})
    assert not result.ok
    assert result.error.field == "userId"
