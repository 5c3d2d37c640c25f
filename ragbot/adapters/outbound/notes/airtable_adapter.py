"""Airtable adapter for storing chat notes."""

import logging
from typing import Any

import requests

from ....core.domain.exceptions import MissingAPIKeyError, NotesResponseError, NotesServiceError
from ....core.ports.notes_port import NotesPort

logger = logging.getLogger(__name__)


def mask_token(token: str, visible: int = 5) -> str:
    """Show at most ``visible`` leading characters and never more than half."""
    shown = min(visible, len(token) // 2)
    return f"{token[:shown]}..."


def _upstream_error_message(data: Any, default: str) -> str:
    """Pull the message out of an Airtable error body.

    Airtable sends either ``{"error": {"type": ..., "message": ...}}`` or
    ``{"error": "NOT_FOUND"}``.
    """
    error = data.get("error") if isinstance(data, dict) else None
    if isinstance(error, dict):
        return error.get("message") or error.get("type") or default
    if isinstance(error, str) and error:
        return error
    return default


class AirtableNotesAdapter(NotesPort):
    """Writes ``{Name, Notes}`` records to one Airtable table."""

    def __init__(
        self,
        token: str,
        base_id: str,
        table_name: str = "Notes",
        api_url: str = "https://api.airtable.com/v0",
        timeout: float = 30.0,
    ) -> None:
        """Initialize the adapter.

        Args:
            token: Airtable personal access token.
            base_id: Airtable base identifier.
            table_name: Table receiving the notes.
            api_url: Airtable REST base URL.
            timeout: Per-request timeout in seconds.
        """
        self.token = token
        self.base_id = base_id
        self.table_name = table_name
        self.api_url = api_url.rstrip("/")
        self.timeout = timeout

    @property
    def table_url(self) -> str:
        return f"{self.api_url}/{self.base_id}/{self.table_name}"

    def _headers(self) -> dict[str, str]:
        if not self.token:
            raise MissingAPIKeyError("AIRTABLE_TOKEN is not set; notes are unavailable")
        return {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
        }

    def _diagnostics(self) -> dict[str, Any]:
        return {
            "base_id": self.base_id,
            "table_name": self.table_name,
            "token_prefix": mask_token(self.token),
            "token_length": len(self.token),
        }

    def create_note(self, name: str, notes: str) -> dict[str, Any]:
        """Create one record with ``Name`` and ``Notes`` fields.

        Returns:
            The parsed Airtable response body.

        Raises:
            MissingAPIKeyError: If no token is configured.
            NotesServiceError: If Airtable rejects the record or is unreachable.
            NotesResponseError: If Airtable's body is not JSON.
        """
        headers = self._headers()
        payload = {"records": [{"fields": {"Name": name, "Notes": notes}}]}
        logger.info("Creating note in %s/%s", self.base_id, self.table_name)

        try:
            response = requests.post(self.table_url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as e:
            raise NotesServiceError(
                "Failed to reach the notes service", cause=e, context={"table": self.table_name}
            ) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("Notes service returned a non-JSON body (status %s)", response.status_code)
            raise NotesResponseError("Invalid response from notes service", cause=e) from e

        if not response.ok:
            message = _upstream_error_message(data, "Failed to create note")
            logger.error("Notes service error %s: %s", response.status_code, message)
            raise NotesServiceError(
                message,
                status_code=response.status_code,
                context={"table": self.table_name},
            )

        return data

    def check_connection(self) -> dict[str, Any]:
        """List one record to verify the token, base and table.

        Never raises for upstream failures: the outcome is reported in the
        returned diagnostics, which never contain the full token.
        """
        result = self._diagnostics()
        if not self.token:
            return {**result, "success": False, "error": "AIRTABLE_TOKEN is not set"}

        try:
            response = requests.get(
                self.table_url,
                params={"maxRecords": 1},
                headers=self._headers(),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Notes connectivity check failed: %s", type(e).__name__)
            return {**result, "success": False, "error": "Failed to reach the notes service"}

        result.update({"status": response.status_code, "status_text": response.reason})
        try:
            data = response.json()
        except ValueError:
            return {**result, "success": False, "error": "Failed to parse notes service response"}

        if not response.ok:
            return {
                **result,
                "success": False,
                "error": _upstream_error_message(data, "Failed to connect to notes service"),
            }

        return {**result, "success": True, "data": data}
