"""Shared fixtures."""

import os
import stat
from datetime import datetime, timezone

import pytest

NOW = datetime(2024, 1, 1, tzinfo=timezone.utc)

# Stand-in for the keybase client. Messages look like "SIGNED:<signer>:<text>";
# anything else fails verification the way keybase does (non-zero exit).
FAKE_KEYBASE = r"""#!/bin/sh
if [ "$1" = "--version" ]; then
  echo "keybase version 6.2.4"
  exit 0
fi
if [ "$1" != "verify" ] || [ "$2" != "-m" ]; then
  echo "unexpected arguments: $*" >&2
  exit 2
fi
msg="$3"
case "$msg" in
  SIGNED:*:*) ;;
  *) echo "ERROR Failed to verify: bad signature" >&2; exit 1 ;;
esac
rest="${msg#SIGNED:}"
signer="${rest%%:*}"
if [ "$4" = "-S" ] && [ "$5" != "$signer" ]; then
  echo "ERROR Wrong signer: wanted $5 but got $signer" >&2
  exit 1
fi
printf '%s' "${rest#*:}"
"""


@pytest.fixture
def now():
    return NOW


@pytest.fixture
def fake_keybase(tmp_path):
    """Path to an executable that behaves like `keybase verify`."""
    path = tmp_path / "keybase"
    path.write_text(FAKE_KEYBASE)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return str(path)


@pytest.fixture
def missing_keybase(tmp_path):
    return os.path.join(str(tmp_path), "no-such-keybase")


@pytest.fixture
def clean_env(monkeypatch):
    for key in ("KEYBASEID_KEYBASE", "KEYBASEID_SCORE",
                "KEYBASEID_TWITTER_KEY", "KEYBASEID_TWITTER_SECRET"):
        monkeypatch.delenv(key, raising=False)
