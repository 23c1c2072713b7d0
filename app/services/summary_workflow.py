"""Summary workflow - sequences fetch, extract, summarize and write-back."""

import logging
from typing import Any, Optional

from app.core.exceptions import EmptyResultError, UpstreamError, ValidationError
from app.models.summary import ApplySummaryResponse, InvocationContext
from app.services.document_text import flatten, is_document
from app.services.jira_client import JiraClient
from app.services.llm_client import SummarizationClient

logger = logging.getLogger(__name__)

GENERATION_FAILED = "Failed to generate summary due to an error."
NO_DESCRIPTION = "No description available for summarization."
NO_CONTENT = "No meaningful content found in the description."
NO_TEXT = "No meaningful text found in the description."
SUMMARY_UPDATED = "Summary updated successfully"


class SummaryWorkflow:
    """Generates issue summaries and applies them back to Jira.

    ``generate`` is best effort and always returns a string. ``apply``
    mutates the issue and lets every failure propagate.
    """

    def __init__(
        self,
        jira: Optional[JiraClient] = None,
        summarizer: Optional[SummarizationClient] = None,
    ):
        self.jira = jira or JiraClient()
        self.summarizer = summarizer or SummarizationClient()

    async def generate(self, ctx: InvocationContext) -> str:
        """Return a summary of the issue description, or a diagnostic message."""
        try:
            return await self._generate(ctx.issue_key)
        except UpstreamError as e:
            logger.error(
                f"Summary generation for {ctx.issue_key} failed: "
                f"upstream status {e.upstream_status}"
            )
        except EmptyResultError:
            logger.error(f"Summary generation for {ctx.issue_key} produced no text")
        except Exception as e:
            logger.exception(f"Summary generation for {ctx.issue_key} failed: {e}")
        return GENERATION_FAILED

    async def _generate(self, issue_key: str) -> str:
        details = await self.jira.fetch_issue_details(issue_key)

        fields = details.get("fields") if isinstance(details, dict) else None
        description = fields.get("description") if isinstance(fields, dict) else None
        if not is_document(description):
            return NO_DESCRIPTION

        content = description.get("content")
        if not isinstance(content, list):
            return NO_CONTENT

        text = flatten(content).strip()
        if not text:
            return NO_TEXT

        logger.info(f"Summarizing {issue_key} ({len(text)} chars)")
        summary = await self.summarizer.summarize(text)
        if not isinstance(summary, str):
            raise TypeError(f"Summarizer returned {type(summary).__name__}, expected str")
        return summary

    async def apply(self, ctx: InvocationContext, candidate: Any) -> ApplySummaryResponse:
        """Write ``candidate`` as the issue summary.

        Raises:
            ValidationError: If the candidate is not a non-empty string.
            IssueSummaryError: Whatever the Jira client raised, unchanged.
        """
        if not isinstance(candidate, str) or not candidate.strip():
            raise ValidationError("Summary must be a non-empty string")

        await self.jira.update_issue_summary(ctx.issue_key, candidate.strip())
        return ApplySummaryResponse(success=True, message=SUMMARY_UPDATED)


def get_summary_workflow() -> SummaryWorkflow:
    """Get summary workflow instance."""
    return SummaryWorkflow()
