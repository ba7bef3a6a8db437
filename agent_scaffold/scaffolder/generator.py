"""Main scaffolding orchestrator.

Takes a ``ScaffoldRequest`` (project name plus optional template category) and
generates a ready-to-run Claude Agent SDK project directory containing the
entry-point program, ``package.json``, ``tsconfig.json`` and ``CLAUDE.md``.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from agent_scaffold.config import ScaffoldConfig
from agent_scaffold.exceptions import UsageError
from agent_scaffold.utils import ensure_dir

from .catalog import AgentTemplate, resolve_template
from .templates import TemplateRenderer, write_file


SDK_PACKAGE = "@anthropic-ai/claude-agent-sdk"
MANIFEST_FILE = "package.json"
COMPILER_CONFIG_FILE = "tsconfig.json"
NOTES_FILE = "CLAUDE.md"

DEV_DEPENDENCIES: dict[str, str] = {
    "@types/node": "^20.0.0",
    "typescript": "^5.0.0",
    "tsx": "^4.0.0",
}


# ---------------------------------------------------------------------------
# Request model
# ---------------------------------------------------------------------------


class ScaffoldRequest(BaseModel):
    """What to scaffold: a project name and an optional template category."""

    project_name: str = Field(..., description="Directory name and package name of the project")
    category: str | None = Field(
        default=None,
        description="Template category; None means the default template",
    )

    @property
    def entry_file(self) -> str:
        """File name of the generated entry-point program."""
        return f"{self.project_name}.ts"


# ---------------------------------------------------------------------------
# Main generator
# ---------------------------------------------------------------------------


class AgentProjectGenerator:
    """Renders and writes one agent project.

    Inputs are validated and the template is resolved in the constructor, so
    a bad request fails before anything touches the filesystem.  All four
    files are rendered in memory before the first write.
    """

    def __init__(
        self,
        request: ScaffoldRequest,
        config: ScaffoldConfig | None = None,
    ) -> None:
        if not request.project_name or not request.project_name.strip():
            raise UsageError("A project name is required")
        self.request = request
        self.config = config or ScaffoldConfig()
        self.category, self.template = resolve_template(request.category)
        self.renderer = TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def render_all(self) -> dict[str, str]:
        """Render every generated file.

        Returns:
            Mapping of file name (relative to the project root) to content,
            in write order.
        """
        context = self._build_context()
        return {
            self.request.entry_file: self.renderer.render("agent.ts.j2", context),
            MANIFEST_FILE: render_package_json(
                self.request.project_name, sdk_version=self.config.sdk_version
            ),
            COMPILER_CONFIG_FILE: render_tsconfig(),
            NOTES_FILE: self.renderer.render("CLAUDE.md.j2", context),
        }

    async def generate(self, output_dir: str | Path | None = None) -> Path:
        """Generate the project directory.

        Args:
            output_dir: Parent directory where the project folder will be
                created.  Defaults to ``config.output_dir``.

        An absolute project name is joined under *output_dir* with its root
        removed, so ``/tmp/x`` is written to ``<output_dir>/tmp/x``.

        Returns:
            Path to the generated project root.

        Raises:
            OSError: If the directory or any file cannot be written.  Files
                written before the failure are left in place.
        """
        files = self.render_all()

        base = Path(output_dir) if output_dir is not None else self.config.output_dir
        project_root = base / _strip_anchor(self.request.project_name)
        await asyncio.to_thread(ensure_dir, project_root)

        for filename, content in files.items():
            await write_file(project_root / _strip_anchor(filename), content)

        return project_root

    # -- Internal helpers --------------------------------------------------

    def _build_context(self) -> dict[str, Any]:
        return build_context(
            self.request.project_name, self.category, self.template, self.config
        )


def _strip_anchor(name: str) -> Path:
    """Return *name* as a relative path, dropping any root or drive."""
    path = Path(name)
    if path.is_absolute():
        return path.relative_to(path.anchor)
    return path


# ---------------------------------------------------------------------------
# Renderers for the JSON files
# ---------------------------------------------------------------------------


def build_context(
    project_name: str,
    category: str,
    template: AgentTemplate,
    config: ScaffoldConfig,
) -> dict[str, Any]:
    """Assemble the Jinja2 context shared by the program and notes templates."""
    return {
        "project_name": project_name,
        "entry_file": f"{project_name}.ts",
        "category": category,
        "description": template.description,
        "system_prompt": template.system_prompt,
        "tools": list(template.tools),
        "model": config.model,
        "permission_mode": config.permission_mode,
        "max_turns": config.max_turns,
    }


def render_package_json(project_name: str, sdk_version: str = "latest") -> str:
    """Render the npm manifest for the generated project."""
    manifest = {
        "name": project_name,
        "version": "1.0.0",
        "type": "module",
        "scripts": {
            "start": f"npx tsx {project_name}.ts",
            "build": "tsc",
        },
        "dependencies": {
            SDK_PACKAGE: sdk_version,
        },
        "devDependencies": dict(DEV_DEPENDENCIES),
    }
    return json.dumps(manifest, indent=2, ensure_ascii=False)


def render_tsconfig() -> str:
    """Render the TypeScript compiler configuration."""
    tsconfig = {
        "compilerOptions": {
            "target": "ES2022",
            "module": "NodeNext",
            "moduleResolution": "NodeNext",
            "strict": True,
            "esModuleInterop": True,
            "skipLibCheck": True,
            "outDir": "./dist",
        },
        "include": ["*.ts"],
    }
    return json.dumps(tsconfig, indent=2)


# ---------------------------------------------------------------------------
# Convenience entry points
# ---------------------------------------------------------------------------


async def scaffold(
    project_name: str | None,
    category: str | None = None,
    output_dir: str | Path | None = None,
    config: ScaffoldConfig | None = None,
) -> Path:
    """Scaffold a new agent project.

    Raises:
        UsageError: If *project_name* is missing or blank.
        UnknownCategoryError: If *category* is given but not a known template.
        OSError: If the project directory or a file cannot be written.
    """
    if not project_name or not project_name.strip():
        raise UsageError("A project name is required")
    request = ScaffoldRequest(project_name=project_name, category=category)
    generator = AgentProjectGenerator(request, config)
    return await generator.generate(output_dir)


def scaffold_sync(
    project_name: str | None,
    category: str | None = None,
    output_dir: str | Path | None = None,
    config: ScaffoldConfig | None = None,
) -> Path:
    """Blocking wrapper around :func:`scaffold`."""
    return asyncio.run(scaffold(project_name, category, output_dir, config))
