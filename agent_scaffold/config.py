"""Agent scaffolder configuration.

Typed settings for the scaffolder.  The defaults reproduce the generated
project exactly as documented; overriding them only changes the values baked
into the generated entry-point program and manifest.  Nothing here is read
from the environment: the CLI always uses the defaults and only sets
``output_dir`` from ``--output``.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field


class ScaffoldConfig(BaseModel):
    """Global scaffolder configuration.

    Instances are created by the CLI entry point or by library callers and
    passed to the generator.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory in which the project folder is created",
    )
    model: str = Field(default="opus", description="Model tier used by the generated agent")
    permission_mode: str = Field(
        default="bypassPermissions",
        description="Permission mode passed to the agent SDK query",
    )
    max_turns: int = Field(default=250, ge=1, description="Turn ceiling of the generated agent")
    sdk_version: str = Field(
        default="latest",
        description="Version specifier for the agent SDK dependency in package.json",
    )
