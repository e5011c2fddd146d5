#!/usr/bin/env python3
"""
keybaseid CLI — score Keybase users and authenticate signed messages.

Commands:
    score   - Trust score for a Keybase username
    verify  - Verify a Saltpack signed message against a text
    auth    - Verify a message and check the signer's score

Options fall back to the KEYBASEID_* environment variables.
"""

import argparse
import asyncio
import json
import logging
import os
import sys
from typing import Optional

from keybaseid.clients import TwitterCredentials
from keybaseid.config import ENV_TWITTER_KEY, ENV_TWITTER_SECRET, resolve_keybase_path
from keybaseid.errors import ConfigurationError, VerificationError
from keybaseid.gate import AuthenticationGate
from keybaseid.scoring import ScoreAggregator
from keybaseid.verifier import MessageVerifier


def _output(data: dict, args: argparse.Namespace, human_fn=None):
    """Output data as JSON or pretty-printed."""
    if getattr(args, "json", False) or human_fn is None:
        print(json.dumps(data, indent=2, default=str))
    else:
        human_fn(data)


def _twitter_credentials(args: argparse.Namespace) -> Optional[TwitterCredentials]:
    key = args.twitter_key or os.environ.get(ENV_TWITTER_KEY)
    secret = args.twitter_secret or os.environ.get(ENV_TWITTER_SECRET)
    if bool(key) != bool(secret):
        raise ConfigurationError("Twitter key and secret must be given together.",
                                 option="twitter_api_secret" if key else "twitter_api_key")
    return TwitterCredentials(key, secret) if key else None


# ─── Commands ──────────────────────────────────────────────────────

def cmd_score(args):
    """Score a Keybase user across platforms."""
    aggregator = ScoreAggregator(_twitter_credentials(args))
    details = asyncio.run(aggregator.score_details(args.username))
    result = {"username": args.username, **details.to_dict()}

    def human(d):
        print(f"🔑 {d['username']}: {d['total']} ({d['identity']})")
        if args.details:
            for key, points in sorted(d["score"].items()):
                print(f"   {key:<24}{points:>3}")

    _output(result, args, human)
    return result


def cmd_verify(args):
    """Verify a signed message, optionally against a signer."""
    verifier = MessageVerifier(resolve_keybase_path(args.keybase, os.environ))
    verified = asyncio.run(verifier.verify(args.message, args.text, args.username))
    result = {"verified": verified, "username": args.username}

    def human(d):
        signer = f" by {d['username']}" if d["username"] else ""
        if d["verified"]:
            print(f"✅ Message verified{signer}")
        else:
            print(f"❌ Message could not be verified{signer}")

    _output(result, args, human)
    return result


def cmd_auth(args):
    """Verify a message and check its signer's trust score."""
    async def run():
        gate = AuthenticationGate(
            keybase_path=args.keybase,
            min_score=args.min_score,
            twitter_api_key=args.twitter_key,
            twitter_api_secret=args.twitter_secret,
            health_check=False,
        )
        await gate.check_health()
        return gate.min_score, await gate.authenticate(args.message, args.text, args.username)

    min_score, authenticated = asyncio.run(run())
    result = {"username": args.username, "authenticated": authenticated, "min_score": min_score}

    def human(d):
        if d["authenticated"]:
            print(f"✅ {d['username']} authenticated (minimum score {d['min_score']})")
        else:
            print(f"🚫 {d['username']} verified but scored below {d['min_score']}")

    _output(result, args, human)
    return result


# ─── Parser ────────────────────────────────────────────────────────

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="keybaseid",
        description="keybaseid — Keybase identity scoring and authentication",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    sub = parser.add_subparsers(dest="command", help="Available commands")

    def add_twitter(p):
        p.add_argument("--twitter-key", help="Twitter API key (KEYBASEID_TWITTER_KEY)")
        p.add_argument("--twitter-secret", help="Twitter API secret (KEYBASEID_TWITTER_SECRET)")

    # score
    p = sub.add_parser("score", help="Trust score for a Keybase user")
    p.add_argument("username", help="Keybase username")
    p.add_argument("-d", "--details", action="store_true", help="Show per-signal points")
    add_twitter(p)

    # verify
    p = sub.add_parser("verify", help="Verify a signed message")
    p.add_argument("message", help="Saltpack signed message")
    p.add_argument("text", help="Text the message must contain")
    p.add_argument("-u", "--username", help="Require the message to be signed by this user")
    p.add_argument("-k", "--keybase", help="Path to the keybase client (KEYBASEID_KEYBASE)")

    # auth
    p = sub.add_parser("auth", help="Verify a message and check the signer's score")
    p.add_argument("message", help="Saltpack signed message")
    p.add_argument("text", help="Text the message must contain")
    p.add_argument("username", help="Keybase username of the signer")
    p.add_argument("-k", "--keybase", help="Path to the keybase client (KEYBASEID_KEYBASE)")
    p.add_argument("-m", "--min-score", type=int, help="Minimum score (KEYBASEID_SCORE, default 51)")
    add_twitter(p)

    return parser


def main(argv: Optional[list[str]] = None) -> Optional[dict]:
    """CLI entry point. Returns result dict for testing."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    commands = {
        "score": cmd_score,
        "verify": cmd_verify,
        "auth": cmd_auth,
    }

    try:
        return commands[args.command](args)
    except ConfigurationError as e:
        print(f"❌ Configuration error: {e}", file=sys.stderr)
        sys.exit(1)
    except VerificationError as e:
        print(f"❌ {e}", file=sys.stderr)
        sys.exit(2)


def run(argv: Optional[list[str]] = None) -> None:
    """Console script entry point; exits 0 on success."""
    main(argv)


if __name__ == "__main__":
    run()
