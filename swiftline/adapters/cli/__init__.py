# swiftline/adapters/cli/__init__.py

"""CLI adapter for swiftline"""

# Local imports
from swiftline.adapters.cli.main import main
from swiftline.adapters.cli.parser import create_argument_parser

__all__ = ["create_argument_parser", "main"]
