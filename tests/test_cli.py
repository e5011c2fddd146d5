"""Tests for the keybaseid CLI."""

import json
import sys

import pytest

from keybaseid import cli
from keybaseid.cli import build_parser, main
from keybaseid.scoring import IdentityTier, ScoreDetails


@pytest.fixture
def fixed_score(monkeypatch):
    """Replace platform lookups with a fixed result."""
    seen = {}

    async def score_details(self, username):
        seen["username"] = username
        seen["credentials"] = self.twitter_credentials
        return ScoreDetails(score={"keybase_age": 6, "github_age": 5}, total=11,
                            identity=IdentityTier.UNKNOWN)

    monkeypatch.setattr(cli.ScoreAggregator, "score_details", score_details)
    return seen


def test_parser_commands():
    parser = build_parser()
    args = parser.parse_args(["score", "alice", "--details"])
    assert args.command == "score" and args.details
    args = parser.parse_args(["auth", "MSG", "TXT", "alice", "-m", "40"])
    assert args.min_score == 40


def test_no_command_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 1


def test_score_json(fixed_score, clean_env, capsys):
    result = main(["--json", "score", "alice"])
    assert result["total"] == 11
    assert result["identity"] == "Unknown"
    assert json.loads(capsys.readouterr().out)["username"] == "alice"
    assert fixed_score["credentials"] is None


def test_score_human_details(fixed_score, clean_env, capsys):
    main(["score", "alice", "-d"])
    out = capsys.readouterr().out
    assert "alice: 11 (Unknown)" in out
    assert "keybase_age" in out


def test_score_with_twitter_env(fixed_score, clean_env, monkeypatch):
    monkeypatch.setenv("KEYBASEID_TWITTER_KEY", "k")
    monkeypatch.setenv("KEYBASEID_TWITTER_SECRET", "s")
    main(["--json", "score", "alice"])
    assert fixed_score["credentials"].api_key == "k"


def test_score_with_half_twitter_pair(fixed_score, clean_env, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["score", "alice", "--twitter-key", "k"])
    assert exc.value.code == 1
    assert "Configuration error" in capsys.readouterr().err


def test_verify(fake_keybase, clean_env):
    result = main(["--json", "verify", "SIGNED:alice:hi", "hi", "-u", "alice", "-k", fake_keybase])
    assert result == {"verified": True, "username": "alice"}


def test_verify_without_keybase_path(clean_env, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["verify", "SIGNED:alice:hi", "hi"])
    assert exc.value.code == 1
    assert "KEYBASEID_KEYBASE" in capsys.readouterr().err


def test_auth_passes(fake_keybase, fixed_score, clean_env):
    result = main(["--json", "auth", "SIGNED:alice:hi", "hi", "alice", "-k", fake_keybase, "-m", "10"])
    assert result == {"username": "alice", "authenticated": True, "min_score": 10}


def test_auth_low_score(fake_keybase, fixed_score, clean_env, capsys):
    result = main(["auth", "SIGNED:alice:hi", "hi", "alice", "-k", fake_keybase])
    assert result["authenticated"] is False
    assert "below 51" in capsys.readouterr().out


def test_auth_unverified_exits_2(fake_keybase, fixed_score, clean_env, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["auth", "garbage", "hi", "alice", "-k", fake_keybase])
    assert exc.value.code == 2
    assert "Could not verify user message." in capsys.readouterr().err
    assert "username" not in fixed_score


def test_verify_ignores_unrelated_config(fake_keybase, clean_env, monkeypatch):
    monkeypatch.setenv("KEYBASEID_SCORE", "high")
    monkeypatch.setenv("KEYBASEID_TWITTER_KEY", "k")
    result = main(["--json", "verify", "SIGNED:alice:hi", "hi", "-k", fake_keybase])
    assert result["verified"] is True


def test_console_script_exits_zero(fake_keybase, clean_env, capsys):
    with pytest.raises(SystemExit) as exc:
        sys.exit(cli.run(["--json", "verify", "SIGNED:alice:hi", "hi", "-k", fake_keybase]))
    assert exc.value.code is None
    assert capsys.readouterr().err == ""
