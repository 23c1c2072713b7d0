"""Summary workflow Pydantic models."""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

ISSUE_KEY_PATTERN = r"^[A-Za-z0-9_-]+$"


class InvocationContext(BaseModel):
    """Host-supplied context for one workflow invocation."""

    issue_key: str = Field(
        ..., pattern=ISSUE_KEY_PATTERN, description="Key of the issue being summarized"
    )


class SummaryRequest(BaseModel):
    """A single-turn request to the generation API."""

    prompt_template: str = Field(..., description="Instruction with a {text} placeholder")
    source_text: str = Field(..., description="Plain text extracted from the description")
    model: str
    max_tokens: int = Field(default=256, gt=0)
    stream: bool = Field(default=False)

    @field_validator("source_text")
    @classmethod
    def source_text_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("source_text must not be empty")
        return value

    @property
    def prompt(self) -> str:
        return self.prompt_template.format(text=self.source_text)

    def to_payload(self) -> Dict[str, Any]:
        """Render the Messages API request body."""
        return {
            "model": self.model,
            "messages": [{"role": "user", "content": self.prompt}],
            "max_tokens": self.max_tokens,
            "stream": self.stream,
        }


class GenerateSummaryResponse(BaseModel):
    """Generated summary, or a fixed diagnostic message."""

    summary: str


class ApplySummaryRequest(BaseModel):
    """Summary text to write back to the issue."""

    summary: str = Field(..., description="Candidate summary; trimmed before writing")


class ApplySummaryResponse(BaseModel):
    """Outcome of writing the summary back."""

    success: bool
    message: str
