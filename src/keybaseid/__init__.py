"""keybaseid — Keybase identity scoring and signed-message authentication."""

from keybaseid.config import (
    KeybaseIdConfig, KeybaseIdOptions, TwitterCredentials, resolve_config, resolve_keybase_path,
)
from keybaseid.errors import ConfigurationError, KeybaseIdError, VerificationError
from keybaseid.gate import AuthenticationGate
from keybaseid.scoring import (
    IdentityTier, ScoreAggregator, ScoreDetails, ScoreRecord,
    SOCIAL_CREDENTIAL_SUBSTITUTION, classify_total,
)
from keybaseid.verifier import MessageVerifier

# Backwards compatibility
KeybaseId = AuthenticationGate

__version__ = "1.0.0"

__all__ = [
    "AuthenticationGate",
    "KeybaseId",
    "MessageVerifier",
    "ScoreAggregator",
    "ScoreDetails",
    "ScoreRecord",
    "IdentityTier",
    "classify_total",
    "SOCIAL_CREDENTIAL_SUBSTITUTION",
    "KeybaseIdConfig",
    "KeybaseIdOptions",
    "TwitterCredentials",
    "resolve_config",
    "resolve_keybase_path",
    "KeybaseIdError",
    "ConfigurationError",
    "VerificationError",
]
