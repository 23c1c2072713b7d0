"""Pytest configuration and fixtures."""

import os
from types import SimpleNamespace
from typing import Any, Dict, Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

# Set test environment before importing app modules
os.environ["API_KEYS"] = "test-api-key"
os.environ["REQUIRE_API_KEY"] = "false"
os.environ["JIRA_BASE_URL"] = "https://example.atlassian.net"
os.environ["JIRA_EMAIL"] = "bot@example.com"
os.environ["JIRA_API_TOKEN"] = "jira-test-token"
os.environ["ANTHROPIC_API_KEY"] = "sk-ant-test"


def _paragraph(*texts: str) -> Dict[str, Any]:
    """Build a paragraph block with one text node per argument."""
    return {
        "type": "paragraph",
        "content": [{"type": "text", "text": t} for t in texts],
    }


def make_message(*blocks: Any) -> SimpleNamespace:
    """Build a Messages API response with the given content blocks."""
    return SimpleNamespace(content=list(blocks))


def text_block(text: str) -> SimpleNamespace:
    return SimpleNamespace(type="text", text=text)


@pytest.fixture
def test_api_key() -> str:
    """Test API key."""
    return "test-api-key"


@pytest.fixture
def test_settings():
    """Settings double with every upstream configured."""
    settings = MagicMock()
    settings.jira_base_url = "https://example.atlassian.net"
    settings.jira_email = "bot@example.com"
    settings.jira_api_token = "jira-test-token"
    settings.anthropic_api_key = "sk-ant-test"
    settings.anthropic_model = "claude-sonnet-4-20250514"
    settings.anthropic_api_version = "2023-06-01"
    settings.summary_max_tokens = 256
    settings.request_timeout_seconds = 5.0
    return settings


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    """A description with two paragraphs and a non-paragraph block."""
    return {
        "type": "doc",
        "version": 1,
        "content": [
            _paragraph("Login fails ", "on Safari."),
            {"type": "codeBlock", "content": [{"type": "text", "text": "ignored()"}]},
            _paragraph("Users see a blank page."),
        ],
    }


@pytest.fixture
def mock_jira():
    """Mock Jira client."""
    client = MagicMock()
    client.fetch_issue_details = AsyncMock()
    client.update_issue_summary = AsyncMock(return_value=True)
    return client


@pytest.fixture
def mock_summarizer():
    """Mock summarization client that returns a fixed summary."""
    client = MagicMock()
    client.summarize = AsyncMock(return_value="Safari login shows a blank page")
    return client


@pytest.fixture
def mock_anthropic():
    """Mock AsyncAnthropic client."""
    client = MagicMock()
    client.messages.create = AsyncMock(
        return_value=make_message(text_block("  A concise summary.  "))
    )
    return client


@pytest.fixture
def app_client(mock_jira, mock_summarizer) -> Generator[TestClient, None, None]:
    """Test client with the workflow wired to mock upstreams."""
    from app.core.config import get_settings

    get_settings.cache_clear()

    from app.main import app
    from app.services.summary_workflow import SummaryWorkflow, get_summary_workflow

    app.dependency_overrides[get_summary_workflow] = lambda: SummaryWorkflow(
        jira=mock_jira, summarizer=mock_summarizer
    )

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()
    get_settings.cache_clear()
