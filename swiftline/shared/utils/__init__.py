# swiftline/shared/utils/__init__.py

"""Shared utility functions"""

# Local imports
from swiftline.shared.utils.style import err_line
from swiftline.shared.utils.style import ok
from swiftline.shared.utils.style import print_json
from swiftline.shared.utils.style import print_text
from swiftline.shared.utils.style import status_line
from swiftline.shared.utils.style import title

__all__ = [
    "err_line",
    "ok",
    "print_json",
    "print_text",
    "status_line",
    "title",
]
