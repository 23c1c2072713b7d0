"""Issue summary API routes."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path

from app.core.security import ApiKeyDep
from app.models.summary import (
    ApplySummaryRequest,
    ApplySummaryResponse,
    GenerateSummaryResponse,
    ISSUE_KEY_PATTERN,
    InvocationContext,
)
from app.services.summary_workflow import SummaryWorkflow, get_summary_workflow

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/issues", tags=["issues"])


def get_invocation_context(
    issue_key: Annotated[
        str,
        Path(pattern=ISSUE_KEY_PATTERN, description="Jira issue key, e.g. PROJ-123"),
    ],
) -> InvocationContext:
    """Build the invocation context from the request path."""
    return InvocationContext(issue_key=issue_key)


ContextDep = Annotated[InvocationContext, Depends(get_invocation_context)]
WorkflowDep = Annotated[SummaryWorkflow, Depends(get_summary_workflow)]


@router.post("/{issue_key}/summary/generate", response_model=GenerateSummaryResponse)
async def generate_summary(
    ctx: ContextDep,
    workflow: WorkflowDep,
    _api_key: ApiKeyDep,
) -> GenerateSummaryResponse:
    """Generate a summary of the issue description.

    Always answers 200. When no summary can be produced the response carries
    a fixed diagnostic message instead.
    """
    summary = await workflow.generate(ctx)
    return GenerateSummaryResponse(summary=summary)


@router.put("/{issue_key}/summary", response_model=ApplySummaryResponse)
async def apply_summary(
    request: ApplySummaryRequest,
    ctx: ContextDep,
    workflow: WorkflowDep,
    _api_key: ApiKeyDep,
) -> ApplySummaryResponse:
    """Write the given summary back to the issue.

    Validation and Jira failures are returned as errors by the service
    exception handler.
    """
    response = await workflow.apply(ctx, request.summary)
    logger.info(f"Applied summary to {ctx.issue_key}")
    return response
