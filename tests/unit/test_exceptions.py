"""Unit tests for exception handling system.

Tests both the exception hierarchy and the exception handler utilities,
including how each error maps to an HTTP status and client message.
"""

import json
import logging

import pytest

from ragbot.common.exception_handler import (
    GENERIC_ERROR_MESSAGE,
    build_error_response,
    format_exception_json,
    get_client_message,
    get_error_code,
    get_http_status_code,
    log_exception,
)
from ragbot.core.domain.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    DocumentLoadError,
    EmbeddingAPIError,
    EmbeddingError,
    EmbeddingRateLimitError,
    EmptyQueryError,
    InvalidConfigurationError,
    LLMConnectionError,
    LLMError,
    LLMRateLimitError,
    MissingAPIKeyError,
    MissingFieldError,
    NoAnswerError,
    NoDocumentsLoadedError,
    NotesResponseError,
    NotesServiceError,
    PDFExtractionError,
    RagBotError,
    TransientServiceError,
    UpstreamServiceError,
    ValidationError,
    VectorIndexError,
)

# Apply @pytest.mark.unit to all tests in this module
pytestmark = pytest.mark.unit


class TestExceptionHierarchy:
    """Tests for the exception class hierarchy."""

    def test_ragbot_error_is_base(self):
        """RagBotError should be the base for all custom exceptions."""
        for cls in (ConfigurationError, VectorIndexError, LLMError, ValidationError, EmbeddingError):
            assert issubclass(cls, RagBotError)

    def test_embedding_errors_are_transient_upstream_errors(self):
        assert issubclass(EmbeddingError, TransientServiceError)
        assert issubclass(TransientServiceError, UpstreamServiceError)

    def test_notes_errors_are_upstream_errors(self):
        assert issubclass(NotesServiceError, UpstreamServiceError)
        assert issubclass(NotesResponseError, NotesServiceError)

    def test_pdf_errors_are_load_errors(self):
        assert issubclass(PDFExtractionError, DocumentLoadError)

    def test_config_errors_inherit_from_configuration(self):
        assert issubclass(MissingAPIKeyError, ConfigurationError)


class TestExceptionCreation:
    """Tests for creating and using exceptions."""

    def test_basic_exception_creation(self):
        """Basic exception should have message and error code."""
        exc = RagBotError("Test error message")
        assert str(exc) == "Test error message"
        assert exc.message == "Test error message"
        assert exc.error_code == "RAG_ERR_001"

    def test_exception_with_context_and_cause(self):
        """Exception should store extra context and chain the cause."""
        cause = ConnectionError("Network unreachable")
        exc = EmbeddingAPIError("Embedding request failed", cause=cause, context={"batch_size": 20})

        assert exc.cause is cause
        assert exc.extra_context == {"batch_size": 20}

    def test_location_captured(self):
        """Exception should record where it was raised."""

        def raise_it():
            raise DimensionMismatchError("bad vector")

        with pytest.raises(DimensionMismatchError) as exc_info:
            raise_it()

        location = exc_info.value.location
        assert location.method_name == "raise_it"
        assert location.file_name == "test_exceptions.py"
        assert location.line_number > 0

    def test_to_dict(self):
        exc = LLMConnectionError("Connection failed", cause=TimeoutError("slow"), context={"model": "m"})
        data = exc.to_dict()

        assert data["error"] == {"type": "LLMConnectionError", "code": exc.error_code, "message": "Connection failed"}
        assert data["context"] == {"model": "m"}
        assert data["cause"] == {"type": "TimeoutError", "message": "slow"}
        json.dumps(data)

    def test_upstream_status_code(self):
        assert NotesServiceError("nope", status_code=422).status_code == 422
        assert UpstreamServiceError("nope").status_code is None


class TestExceptionHandler:
    """Tests for exception handler utilities."""

    @pytest.mark.parametrize(
        "exc,status",
        [
            (EmptyQueryError("Question is required"), 400),
            (MissingFieldError("Both name and notes are required"), 400),
            (NoAnswerError("no answer"), 404),
            (LLMRateLimitError("slow down"), 429),
            (EmbeddingRateLimitError("slow down"), 429),
            (NotesServiceError("Invalid table", status_code=422), 422),
            (NotesServiceError("unreachable"), 500),
            (NoDocumentsLoadedError("No documents"), 500),
            (MissingAPIKeyError("missing"), 500),
            (InvalidConfigurationError("chunk_overlap too large"), 500),
            (LLMConnectionError("down"), 500),
            (ValueError("plain"), 500),
        ],
    )
    def test_http_status_mapping(self, exc, status):
        assert get_http_status_code(exc) == status

    def test_error_codes(self):
        assert get_error_code(EmptyQueryError("x")) == "RAG_VAL_003"
        assert get_error_code(KeyError("x")) == "PYTHON_ERR"

    def test_exposed_messages(self):
        assert get_client_message(EmptyQueryError("Question is required")) == "Question is required"
        assert get_client_message(NotesServiceError("Invalid table")) == "Invalid table"
        assert get_client_message(NoDocumentsLoadedError("No documents")) == "No documents"

    def test_internal_messages_hidden(self):
        assert get_client_message(LLMConnectionError("secret host 10.0.0.1")) == GENERIC_ERROR_MESSAGE
        assert get_client_message(MissingAPIKeyError("GOOGLE_API_KEY")) == GENERIC_ERROR_MESSAGE
        assert get_client_message(RuntimeError("boom")) == GENERIC_ERROR_MESSAGE

    def test_build_error_response(self):
        body = build_error_response(EmptyQueryError("Question is required"))
        assert body == {"error": "Question is required", "code": "RAG_VAL_003"}

    def test_build_error_response_with_details(self):
        body = build_error_response(LLMConnectionError("down"), include_details=True)
        assert body["error"] == GENERIC_ERROR_MESSAGE
        assert body["details"]["error"]["message"] == "down"

    def test_format_standard_exception(self):
        try:
            raise KeyError("missing")
        except KeyError as e:
            data = format_exception_json(e, include_trace=True, extra_context={"request": "chat"})

        assert data["error"]["code"] == "PYTHON_ERR"
        assert data["location"]["method"] == "test_format_standard_exception"
        assert data["context"] == {"request": "chat"}
        assert data["stack_trace"]

    def test_log_exception_emits_json(self, caplog):
        log = logging.getLogger("ragbot.test")
        with caplog.at_level(logging.ERROR, logger="ragbot.test"):
            log_exception(EmbeddingAPIError("failed"), log=log)

        record = json.loads(caplog.records[-1].getMessage())
        assert record["error"]["type"] == "EmbeddingAPIError"
