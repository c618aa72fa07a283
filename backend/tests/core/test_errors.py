"""Error Hierarchy — status codes and response envelopes.

Tests:
    - Business errors answer 409, infrastructure errors 500
    - to_response() merges echoed input next to the message
    - ServerError prefixes the failure text with "Server error: "
    - ErrorContext exposes only the ids it was given as log extras
"""

from gradation.core.errors import (
    DatabaseError,
    ErrorCategory,
    ErrorContext,
    ExhibitionNotFoundError,
    GradationError,
    RegistrationConflictError,
    ServerError,
)


def test_exhibition_not_found_is_409_with_default_message():
    error = ExhibitionNotFoundError()
    assert error.http_status == 409
    assert error.to_response() == {"message": "Failed to load the exhibition."}


def test_registration_conflict_echoes_input():
    error = RegistrationConflictError(
        "duplicate key", echo={"status": {"universityName": "Hongik"}},
    )
    assert error.http_status == 409
    assert error.category == ErrorCategory.CONFLICT
    assert error.to_response() == {
        "message": "duplicate key",
        "status": {"universityName": "Hongik"},
    }


def test_server_error_prefixes_cause():
    error = ServerError("connection reset", echo={"cursor": 2})
    assert error.http_status == 500
    assert error.to_response() == {
        "message": "Server error: connection reset", "cursor": 2,
    }


def test_database_error_names_operation():
    error = DatabaseError("Integrity constraint violated", "commit")
    assert error.http_status == 500
    assert error.operation == "commit"
    assert error.message == "Database commit failed: Integrity constraint violated"


def test_all_errors_share_base():
    for error in (
        ExhibitionNotFoundError(),
        RegistrationConflictError("x"),
        ServerError("x"),
        DatabaseError("x", "query"),
    ):
        assert isinstance(error, GradationError)
        assert error.code


def test_error_context_log_extra_skips_missing_ids():
    context = ErrorContext(exhibition_id=7)
    assert context.log_extra() == {"exhibition_id": 7}


def test_error_carries_context():
    context = ErrorContext(university_exhibition_id=3, user_id=12)
    error = ServerError("lost connection", context=context)
    assert error.context.log_extra() == {
        "university_exhibition_id": 3, "user_id": 12,
    }


def test_error_without_context_has_no_extras():
    assert ExhibitionNotFoundError().context.log_extra() == {}
