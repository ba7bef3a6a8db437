"""Static catalogue of agent templates.

Five fixed categories, each bundling the tools the generated agent may use,
its system prompt and a one-line description.  The table is built once at
import time and exposed through a read-only mapping.
"""

from __future__ import annotations

from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field

from agent_scaffold.exceptions import UnknownCategoryError


DEFAULT_CATEGORY = "custom"


# ---------------------------------------------------------------------------
# Template model
# ---------------------------------------------------------------------------


class AgentTemplate(BaseModel):
    """One entry of the template table."""

    model_config = ConfigDict(frozen=True)

    tools: tuple[str, ...] = Field(..., description="Allowed tools, in output order")
    system_prompt: str = Field(..., description="System prompt baked into the agent")
    description: str = Field(..., description="One-line description of the agent")
    summary: str = Field(default="", description="Short label shown in CLI usage text")


# ---------------------------------------------------------------------------
# Template table
# ---------------------------------------------------------------------------

TEMPLATES: MappingProxyType[str, AgentTemplate] = MappingProxyType({
    "code-review": AgentTemplate(
        tools=("Read", "Glob", "Grep"),
        system_prompt=(
            "You are a code review expert. Analyze code for:\n"
            "- Bugs and potential crashes\n"
            "- Security vulnerabilities\n"
            "- Performance issues\n"
            "- Code quality improvements\n"
            "\n"
            "Be specific about file names and line numbers."
        ),
        description="Analyze codebases for bugs, security issues, and improvements",
        summary="Analyze codebases for bugs and improvements",
    ),
    "research": AgentTemplate(
        tools=("WebSearch", "WebFetch", "Read", "Write"),
        system_prompt=(
            "You are a research specialist. Your workflow:\n"
            "1. Break topics into subtopics\n"
            "2. Search web for each subtopic\n"
            "3. Extract and verify key information\n"
            "4. Synthesize findings into clear reports"
        ),
        description="Conduct comprehensive research on any topic",
        summary="Conduct comprehensive web research",
    ),
    "automation": AgentTemplate(
        tools=("Read", "Write", "Edit", "Bash", "Glob", "Grep"),
        system_prompt=(
            "You are a file automation specialist. You can:\n"
            "- Read and analyze files\n"
            "- Transform and process data\n"
            "- Generate new files\n"
            "- Run scripts and commands\n"
            "\n"
            "Always verify your work before completing."
        ),
        description="Automate file operations and transformations",
        summary="Automate file operations",
    ),
    "chat": AgentTemplate(
        tools=("Read", "Write", "Edit", "Glob", "Grep", "WebSearch", "WebFetch", "Bash"),
        system_prompt=(
            "You are a helpful AI assistant with access to files and the web.\n"
            "Help users with coding, research, file operations, and more.\n"
            "Be concise but thorough."
        ),
        description="Interactive chat assistant with full capabilities",
        summary="Interactive chat with full capabilities",
    ),
    "custom": AgentTemplate(
        tools=("Read", "Glob", "Grep"),
        system_prompt=(
            "You are a specialized AI agent.\n"
            "Customize this prompt for your specific use case."
        ),
        description="Minimal template for custom agents",
        summary="Minimal template for custom agents",
    ),
})


# ---------------------------------------------------------------------------
# Lookup
# ---------------------------------------------------------------------------


def available_categories() -> list[str]:
    """Return the category names in table order."""
    return list(TEMPLATES)


def resolve_template(category: str | None) -> tuple[str, AgentTemplate]:
    """Look up *category* in the template table.

    ``None`` and the empty string mean "not given" and resolve to the
    ``custom`` entry.  Matching is case-sensitive.

    Returns:
        A ``(category_name, template)`` pair.

    Raises:
        UnknownCategoryError: If a non-empty category is not in the table.
    """
    if not category:
        return DEFAULT_CATEGORY, TEMPLATES[DEFAULT_CATEGORY]

    template = TEMPLATES.get(category)
    if template is None:
        raise UnknownCategoryError(category, available_categories())
    return category, template
