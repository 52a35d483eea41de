# swiftline/application/processing/__init__.py

"""Processing steps for JSON selection"""

# Local imports
from swiftline.application.processing.input_resolver import resolve_input
from swiftline.application.processing.json_parser import RelaxedJsonStrategy
from swiftline.application.processing.json_parser import StrictJsonStrategy
from swiftline.application.processing.json_parser import describe_strict_failure
from swiftline.application.processing.json_parser import parse_json
from swiftline.application.processing.path_resolver import NOT_FOUND
from swiftline.application.processing.path_resolver import resolve_path

__all__ = [
    "NOT_FOUND",
    "RelaxedJsonStrategy",
    "StrictJsonStrategy",
    "describe_strict_failure",
    "parse_json",
    "resolve_input",
    "resolve_path",
]
