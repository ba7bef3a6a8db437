"""Agent scaffolder: starter projects for Claude Agent SDK agents."""

from agent_scaffold.config import ScaffoldConfig
from agent_scaffold.exceptions import ScaffoldError, UnknownCategoryError, UsageError
from agent_scaffold.scaffolder import scaffold, scaffold_sync

__version__ = "1.0.0"

__all__ = [
    "ScaffoldConfig",
    "ScaffoldError",
    "UnknownCategoryError",
    "UsageError",
    "scaffold",
    "scaffold_sync",
]
