"""Platform clients.

Each client performs the HTTP lookups for one platform and returns a
FetchResult carrying either a typed profile or a FetchError.
"""

from .base import FetchError, FetchResult, PlatformClient
from .github import GitHubClient, GitHubProfile
from .keybase import KeybaseClient, KeybaseProfile, KeybaseSignature
from .twitter import TwitterClient, TwitterCredentials, TwitterProfile

__all__ = [
    "FetchError",
    "FetchResult",
    "PlatformClient",
    "GitHubClient",
    "GitHubProfile",
    "KeybaseClient",
    "KeybaseProfile",
    "KeybaseSignature",
    "TwitterClient",
    "TwitterCredentials",
    "TwitterProfile",
]
