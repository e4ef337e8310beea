import pytest

from src.api.error import ClientError, ServerError, raise_for_error
from src.api.responses import failure, success
from src.app.use_cases.families import RemoveMemberResponse
from src.domain.result import Error


@pytest.mark.parametrize(
    "error, status_code",
    [
        (Error.validation({"name": ["The name field is required."]}), 422),
        (Error.domain("NOT_A_MEMBER", "user", "User is not a member of this family."), 422),
        (Error.authentication(), 401),
        (Error.authorization(), 403),
        (Error.not_found("FAMILY_NOT_FOUND", "Family not found."), 404),
    ],
)
def test_client_errors(error, status_code):
    with pytest.raises(ClientError) as exc_info:
        raise_for_error(error)

    assert exc_info.value.status_code == status_code
    assert exc_info.value.base_error is error


def test_internal_error_is_server_error():
    with pytest.raises(ServerError):
        raise_for_error(Error("CODE_GENERATION_FAILED", "Could not generate a code."))


def test_success_envelope():
    assert success("Done") == {"success": True, "message": "Done"}
    assert success("Done", RemoveMemberResponse(removed=1)) == {
        "success": True,
        "message": "Done",
        "data": {"removed": 1},
    }
    assert success("Done", [])["data"] == []


def test_failure_envelope():
    error = Error.validation({"email": ["The email field is required."]})

    assert failure(error, errors=error.errors) == {
        "success": False,
        "message": "The given data was invalid.",
        "error": {"code": "VALIDATION_FAILED", "message": "The given data was invalid."},
        "errors": {"email": ["The email field is required."]},
    }
    assert "errors" not in failure(Error.authentication())
