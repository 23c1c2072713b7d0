"""Jira issue client - reads issue details and writes back the summary field."""

import logging
import re
from typing import Any, Dict, Optional

import httpx

from app.core.config import Settings, get_settings
from app.core.exceptions import FetchError, UpdateError, ValidationError
from app.models.summary import ISSUE_KEY_PATTERN

logger = logging.getLogger(__name__)

ISSUE_PATH = "/rest/api/3/issue/{key}"


def issue_path(issue_key: Any) -> str:
    """Return the REST path for one issue.

    Raises:
        ValidationError: If the key is not a plain issue key such as ``PROJ-123``.
    """
    if not isinstance(issue_key, str) or not re.fullmatch(ISSUE_KEY_PATTERN, issue_key):
        raise ValidationError("Issue key must contain only letters, digits, '-' or '_'")
    return ISSUE_PATH.format(key=issue_key)


class JiraClient:
    """Minimal Jira REST client using the application credential."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.settings = settings or get_settings()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.settings.jira_base_url,
            auth=(self.settings.jira_email, self.settings.jira_api_token),
            headers={"Accept": "application/json"},
            timeout=self.settings.request_timeout_seconds,
            transport=self._transport,
        )

    async def fetch_issue_details(self, issue_key: str) -> Dict[str, Any]:
        """Fetch an issue by key.

        Args:
            issue_key: Jira issue key, e.g. ``PROJ-123``.

        Returns:
            The decoded issue JSON.

        Raises:
            ValidationError: If the issue key is malformed.
            FetchError: On a non-2xx response (with status) or transport failure.
        """
        path = issue_path(issue_key)

        try:
            async with self._client() as client:
                response = await client.get(path)

            if not response.is_success:
                logger.error(
                    f"Fetching issue {issue_key} failed with status {response.status_code}"
                )
                raise FetchError(response.status_code)

            return response.json()

        except FetchError:
            raise
        except Exception as e:
            logger.exception(f"Error fetching issue details for {issue_key}: {e}")
            raise FetchError()

    async def update_issue_summary(self, issue_key: str, summary: Any) -> bool:
        """Replace the issue's summary field.

        Args:
            issue_key: Jira issue key.
            summary: New summary; trimmed before sending.

        Returns:
            True once Jira has accepted the write.

        Raises:
            ValidationError: If ``summary`` is not a non-empty string
                or the issue key is malformed.
            UpdateError: On a non-2xx response (with status) or transport failure.
        """
        if not isinstance(summary, str) or not summary.strip():
            raise ValidationError("Summary must be a non-empty string")
        path = issue_path(issue_key)

        logger.info(f"Updating summary for issue {issue_key}")

        try:
            async with self._client() as client:
                response = await client.put(
                    path,
                    json={"fields": {"summary": summary.strip()}},
                )

            if not response.is_success:
                logger.error(
                    f"Error updating summary for {issue_key} "
                    f"({response.status_code}): {response.text}"
                )
                raise UpdateError(response.status_code)

        except UpdateError:
            raise
        except Exception as e:
            logger.exception(f"Error updating issue summary for {issue_key}: {e}")
            raise UpdateError()

        logger.info(f"Summary updated for issue {issue_key}")
        return True


def get_jira_client() -> JiraClient:
    """Get Jira client instance."""
    return JiraClient()
