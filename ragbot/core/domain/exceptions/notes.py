"""Notes storage exceptions for RagBot."""

from .upstream import UpstreamServiceError


class NotesServiceError(UpstreamServiceError):
    """Notes service rejected the request.

    The message is the upstream's own error text (never credentials) and
    ``status_code`` is the upstream status, both passed to the client.
    """

    error_code = "RAG_NOT_001"
    expose_message = True


class NotesResponseError(NotesServiceError):
    """Notes service answered with a body that is not JSON."""

    error_code = "RAG_NOT_002"
