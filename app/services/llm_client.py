"""Summarization client for the Anthropic Messages API."""

import logging
from typing import Any, Optional

import anthropic

from app.core.config import Settings, get_settings
from app.core.exceptions import (
    EmptyResultError,
    InvalidInputError,
    SummarizationError,
    UpstreamError,
)
from app.models.summary import SummaryRequest

logger = logging.getLogger(__name__)

SUMMARY_PROMPT_TEMPLATE = (
    "Summarize the following Jira issue description in one short sentence "
    "that can be used as the issue title. Respond with the summary only, "
    "without quotes or any preamble.\n\n"
    "{text}"
)


class SummarizationClient:
    """Turns plain text into a one-line summary via Anthropic Claude."""

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client: Optional[Any] = None,
    ):
        self.settings = settings or get_settings()
        self.model = self.settings.anthropic_model
        self.client = client

        if self.client is None and self.settings.anthropic_api_key:
            self.client = anthropic.AsyncAnthropic(
                api_key=self.settings.anthropic_api_key,
                max_retries=0,
                timeout=self.settings.request_timeout_seconds,
                default_headers={"anthropic-version": self.settings.anthropic_api_version},
            )

    def build_request(self, source_text: str) -> SummaryRequest:
        return SummaryRequest(
            prompt_template=SUMMARY_PROMPT_TEMPLATE,
            source_text=source_text,
            model=self.model,
            max_tokens=self.settings.summary_max_tokens,
            stream=False,
        )

    @staticmethod
    def _extract_text(response: Any) -> str:
        """Concatenate the text blocks of a Messages API response."""
        blocks = getattr(response, "content", None) or []
        return "".join(
            block.text
            for block in blocks
            if getattr(block, "type", None) == "text" and isinstance(block.text, str)
        ).strip()

    async def summarize(self, source_text: Any) -> str:
        """Summarize ``source_text``.

        Raises:
            InvalidInputError: If the text is not a non-empty string.
            UpstreamError: If the API answered with a non-success status.
            EmptyResultError: If the response carried no text.
            SummarizationError: For any other failure.
        """
        if not isinstance(source_text, str) or not source_text.strip():
            raise InvalidInputError()

        if self.client is None:
            logger.error("ANTHROPIC_API_KEY not configured")
            raise SummarizationError()

        request = self.build_request(source_text)

        try:
            response = await self.client.messages.create(**request.to_payload())
            summary = self._extract_text(response)
        except anthropic.APIStatusError as e:
            logger.error(f"Summarization API error ({e.status_code}): {e.body}")
            raise UpstreamError(e.status_code, e.body)
        except Exception as e:
            logger.exception(f"Unexpected error calling summarization API: {e}")
            raise SummarizationError()

        if not summary:
            logger.warning(f"Summarization API returned no text (model={self.model})")
            raise EmptyResultError()

        return summary


def get_summarization_client() -> SummarizationClient:
    """Get summarization client instance."""
    return SummarizationClient()
