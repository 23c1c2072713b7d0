"""Plain-text extraction from Atlassian Document Format trees."""

from typing import Any

DOC_TYPE = "doc"
PARAGRAPH_TYPE = "paragraph"
TEXT_TYPE = "text"


def is_document(node: Any) -> bool:
    """Return True if ``node`` is a rich-text document root."""
    return isinstance(node, dict) and node.get("type") == DOC_TYPE


def _inline_text(node: Any) -> str:
    if isinstance(node, dict) and node.get("type") == TEXT_TYPE:
        text = node.get("text")
        return text if isinstance(text, str) else ""
    # Mentions, emoji, hard breaks, ...
    return ""


def _block_text(block: Any) -> str:
    if not isinstance(block, dict) or block.get("type") != PARAGRAPH_TYPE:
        return ""
    children = block.get("content")
    if not isinstance(children, list):
        return ""
    return "".join(_inline_text(child) for child in children)


def flatten(content: Any) -> str:
    """Flatten a document's block sequence to newline-separated text.

    Only paragraph blocks and their text nodes contribute; every other
    variant, and anything malformed, becomes an empty string. Never raises.

    Args:
        content: The ``content`` list of a document node, or anything else.

    Returns:
        One line per block, in document order.
    """
    if not isinstance(content, list):
        return ""
    return "\n".join(_block_text(block) for block in content)
