"""
clinput console entry point.

Examples:
    $ clinput --version
    $ clinput inspect -f v -o sugars -- makecoffee -v --sugars=2 viennois
"""

from loguru import logger
from clinput.commands.app import cli


def main() -> None:
    """Run the clinput command group with package logging enabled."""
    logger.enable("clinput")
    cli(prog_name="clinput")


if __name__ == "__main__":
    main()
