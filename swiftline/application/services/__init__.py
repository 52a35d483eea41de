# swiftline/application/services/__init__.py

"""Application services for the two commands.

Each service runs one command end to end: validate input, do the work,
render the result.
"""

# Local imports
from swiftline.application.services._http_fetch_service import HttpFetchService
from swiftline.application.services._json_select_service import JsonSelectService

__all__ = ["HttpFetchService", "JsonSelectService"]
