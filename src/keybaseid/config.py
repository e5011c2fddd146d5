"""Configuration resolution for keybaseid.

Options passed explicitly win over the environment:

    keybase_path        KEYBASEID_KEYBASE         (required)
    min_score           KEYBASEID_SCORE           (default 51, Passable)
    twitter_api_key     KEYBASEID_TWITTER_KEY     (optional, paired)
    twitter_api_secret  KEYBASEID_TWITTER_SECRET  (optional, paired)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Optional, Union

from .clients.twitter import TwitterCredentials
from .errors import ConfigurationError
from .scoring.tiers import PASSABLE_ID_MIN_SCORE

ENV_KEYBASE_PATH = "KEYBASEID_KEYBASE"
ENV_MIN_SCORE = "KEYBASEID_SCORE"
ENV_TWITTER_KEY = "KEYBASEID_TWITTER_KEY"
ENV_TWITTER_SECRET = "KEYBASEID_TWITTER_SECRET"

DEFAULT_MIN_SCORE = PASSABLE_ID_MIN_SCORE


@dataclass
class KeybaseIdOptions:
    """Options as supplied by a caller. Any of them may be left unset."""
    keybase_path: Optional[str] = None
    min_score: Optional[Union[int, str]] = None
    twitter_api_key: Optional[str] = None
    twitter_api_secret: Optional[str] = None


@dataclass(frozen=True)
class KeybaseIdConfig:
    """Fully resolved configuration."""
    keybase_path: str
    min_score: int = DEFAULT_MIN_SCORE
    twitter_credentials: Optional[TwitterCredentials] = None


def _pick(option: Optional[str], environ: Mapping[str, str], env_key: str) -> Optional[str]:
    if option:
        return option
    return environ.get(env_key) or None


def _parse_min_score(value: Union[int, str], source: str) -> int:
    try:
        if isinstance(value, float) and not value.is_integer():
            raise ValueError(value)
        score = int(value)
    except (TypeError, ValueError, OverflowError):
        raise ConfigurationError(
            f"Invalid minimum score {value!r} from {source}; expected a non-negative integer.",
            option="min_score",
        ) from None
    if score < 0:
        raise ConfigurationError(
            f"Invalid minimum score {score} from {source}; expected a non-negative integer.",
            option="min_score",
        )
    return score


def resolve_keybase_path(option: Optional[str], environ: Mapping[str, str]) -> str:
    """The keybase client path alone, for callers that never score."""
    keybase_path = _pick(option, environ, ENV_KEYBASE_PATH)
    if not keybase_path:
        raise ConfigurationError(
            f"No keybase_path option was specified and no {ENV_KEYBASE_PATH} "
            "environment variable was found. Please specify one.",
            option="keybase_path",
        )
    return keybase_path


def resolve_config(options: KeybaseIdOptions, environ: Mapping[str, str]) -> KeybaseIdConfig:
    """Merge explicit options with an environment snapshot.

    Raises:
        ConfigurationError: no keybase path anywhere, a malformed minimum
            score, or only one half of the Twitter key pair.
    """
    keybase_path = resolve_keybase_path(options.keybase_path, environ)

    if options.min_score is not None:
        min_score = _parse_min_score(options.min_score, "min_score option")
    elif environ.get(ENV_MIN_SCORE):
        min_score = _parse_min_score(environ[ENV_MIN_SCORE], ENV_MIN_SCORE)
    else:
        min_score = DEFAULT_MIN_SCORE

    api_key = _pick(options.twitter_api_key, environ, ENV_TWITTER_KEY)
    api_secret = _pick(options.twitter_api_secret, environ, ENV_TWITTER_SECRET)
    if api_key and not api_secret:
        raise ConfigurationError(
            f"twitter_api_key was given without twitter_api_secret ({ENV_TWITTER_SECRET}).",
            option="twitter_api_secret",
        )
    if api_secret and not api_key:
        raise ConfigurationError(
            f"twitter_api_secret was given without twitter_api_key ({ENV_TWITTER_KEY}).",
            option="twitter_api_key",
        )

    credentials = TwitterCredentials(api_key, api_secret) if api_key and api_secret else None
    return KeybaseIdConfig(
        keybase_path=keybase_path,
        min_score=min_score,
        twitter_credentials=credentials,
    )
