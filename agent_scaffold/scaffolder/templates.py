"""Jinja2 template rendering for agent project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``agent_scaffold/scaffolder/templates/`` directory and renders them with
project-specific context data, plus the async helper used to write rendered
files to disk.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for agent scaffolding.

    Templates are ``.j2`` files under a configurable template directory.
    Undefined variables raise instead of rendering as empty strings, so a
    missing context key never produces a silently broken file.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )
        self.env.filters["json_compact"] = _json_compact_filter
        self.env.filters["bullet_list"] = _bullet_list_filter

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"agent.ts.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)


# ---------------------------------------------------------------------------
# Jinja2 custom filters
# ---------------------------------------------------------------------------

def _json_compact_filter(value: Any) -> str:
    """Serialise *value* as JSON without whitespace, like ``JSON.stringify``."""
    if isinstance(value, tuple):
        value = list(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def _bullet_list_filter(items: Iterable[str]) -> str:
    """Render each item as a ``- item`` markdown bullet, one per line."""
    return "\n".join(f"- {item}" for item in items)


# ---------------------------------------------------------------------------
# File output
# ---------------------------------------------------------------------------

async def write_file(path: Path, content: str) -> None:
    """Write *content* to *path* off the event loop, replacing any old file."""
    await asyncio.to_thread(_write_file, path, content)


def _write_file(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
