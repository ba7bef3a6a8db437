"""Agent project scaffolder -- generates Claude Agent SDK starter projects.

Given a project name and one of five template categories, renders a project
directory with a TypeScript entry point, ``package.json``, ``tsconfig.json``
and a ``CLAUDE.md`` notes file.

Quick usage::

    from agent_scaffold.scaffolder import scaffold

    project_path = await scaffold("my-reviewer", "code-review", "/tmp/output")
"""

from agent_scaffold.scaffolder.catalog import (
    DEFAULT_CATEGORY,
    TEMPLATES,
    AgentTemplate,
    available_categories,
    resolve_template,
)
from agent_scaffold.scaffolder.generator import (
    AgentProjectGenerator,
    ScaffoldRequest,
    scaffold,
    scaffold_sync,
)
from agent_scaffold.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_CATEGORY",
    "TEMPLATES",
    "AgentProjectGenerator",
    "AgentTemplate",
    "ScaffoldRequest",
    "TemplateRenderer",
    "available_categories",
    "resolve_template",
    "scaffold",
    "scaffold_sync",
]
