"""Allow ``python -m agent_scaffold``."""

from agent_scaffold.cli import run

if __name__ == "__main__":
    run()
