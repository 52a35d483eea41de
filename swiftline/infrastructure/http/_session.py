# swiftline/infrastructure/http/_session.py

"""requests session factory"""

# Third party imports
import requests


def build_session(user_agent: str) -> requests.Session:
    """Create the session used for a single GET

    Args:
        user_agent: User-Agent header value sent with every request
    """
    session = requests.Session()
    session.headers["User-Agent"] = user_agent
    return session
