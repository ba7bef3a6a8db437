"""Command-line entry point for the agent scaffolder.

Usage::

    agent-scaffold my-reviewer code-review
    agent-scaffold my-agent                  # uses the "custom" template
    python -m agent_scaffold --list
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path

from rich.markup import escape

from agent_scaffold.config import ScaffoldConfig
from agent_scaffold.exceptions import UnknownCategoryError, UsageError
from agent_scaffold.scaffolder import TEMPLATES, AgentProjectGenerator, ScaffoldRequest
from agent_scaffold.utils import print_error, print_plain, print_success, print_summary_table

PROG = "agent-scaffold"


def usage_text() -> str:
    """Return the usage block printed when no project name is given."""
    width = max(len(name) for name in TEMPLATES)
    lines = [
        "",
        "Claude Agent SDK - Agent Template Generator",
        "",
        f"Usage: {PROG} <agent-name> <type>",
        "",
        "Types:",
    ]
    for name, template in TEMPLATES.items():
        lines.append(f"  {name.ljust(width)}  - {template.summary}")
    lines.extend([
        "",
        "Example:",
        f"  {PROG} my-reviewer code-review",
        "",
    ])
    return "\n".join(lines)


def next_steps_text(project_name: str, category: str) -> str:
    """Return the banner printed after a successful scaffold."""
    return "\n".join([
        "",
        f"✅ Created {project_name} agent ({category})",
        "",
        "Next steps:",
        f"  cd {project_name}",
        "  npm install",
        "  export ANTHROPIC_API_KEY=your-key",
        f'  npx tsx {project_name}.ts "your prompt"',
        "",
    ])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Generate a Claude Agent SDK project from a template",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {PROG} my-reviewer code-review\n"
            f"  {PROG} my-agent -o ./agents\n"
            f"  {PROG} --list\n"
        ),
    )
    parser.add_argument(
        "project_name",
        nargs="?",
        default=None,
        help="Name of the agent project (also its directory name)",
    )
    parser.add_argument(
        "category",
        nargs="?",
        default=None,
        help=f"Template type: {', '.join(TEMPLATES)} (default: custom)",
    )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        dest="list_types",
        help="List available template types and exit",
    )
    return parser


def _print_types() -> None:
    rows = [
        (name, ", ".join(template.tools), template.description)
        for name, template in TEMPLATES.items()
    ]
    print_summary_table(rows, columns=("Type", "Tools", "Description"), title="Agent templates")


def main(argv: list[str] | None = None) -> int:
    """Run the scaffolder CLI and return the process exit code."""
    args = _build_parser().parse_args(argv)

    if args.list_types:
        _print_types()
        return 0

    config = ScaffoldConfig()
    if args.output:
        config.output_dir = Path(args.output)

    try:
        request = ScaffoldRequest(
            project_name=args.project_name or "", category=args.category
        )
        generator = AgentProjectGenerator(request, config)
        project_root = asyncio.run(generator.generate())
    except UsageError:
        print_plain(usage_text())
        return 1
    except UnknownCategoryError as exc:
        print_plain(str(exc))
        print_plain(f"Available types: {', '.join(exc.available)}")
        return 1
    except OSError as exc:
        print_error(f"❌ Failed to create {escape(args.project_name)}: {escape(str(exc))}")
        return 1

    print_plain(next_steps_text(request.project_name, generator.category))
    print_success(f"Project written to {escape(str(project_root))}")
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())
