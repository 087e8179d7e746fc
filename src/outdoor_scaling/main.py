"""Entry-point for launching the console host."""
from __future__ import annotations

from .presentation.cli.app import main as cli_main


def main() -> None:
    """Run the console presentation layer."""
    cli_main()


if __name__ == "__main__":
    main()
