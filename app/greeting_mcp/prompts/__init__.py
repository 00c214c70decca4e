"""
MCP Prompt templates.

Provides the code_review prompt, which asks the model for a structured
review of a code snippet.
"""

from greeting_mcp.prompts.templates import (
    CODE_REVIEW_DESCRIPTION,
    CODE_REVIEW_NAME,
    build_code_review_prompt,
    register_prompts,
)

PROMPT_DESCRIPTIONS = {
    CODE_REVIEW_NAME: CODE_REVIEW_DESCRIPTION,
}

__all__ = [
    "PROMPT_DESCRIPTIONS",
    "build_code_review_prompt",
    "register_prompts",
]
