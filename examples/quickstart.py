#!/usr/bin/env python3
"""keybaseid quickstart — score a Keybase user and gate a login on it.

Run:  KEYBASEID_KEYBASE=$(which keybase) python3 examples/quickstart.py <username> [signed-message nonce]
"""
import asyncio
import sys

from keybaseid import AuthenticationGate, VerificationError


async def main(username, message=None, nonce=None):
    # Reads KEYBASEID_KEYBASE / KEYBASEID_SCORE / KEYBASEID_TWITTER_* from the environment
    gate = AuthenticationGate(health_check=False)
    if not await gate.check_health():
        print("⚠️  keybase client not runnable; message verification will fail")

    # 1. Score breakdown
    details = await gate.score_user(username, details=True)
    print(f"🔑 {username}: {details.total} ({details.identity})")
    for key, points in sorted(details.score.items()):
        if points:
            print(f"   {key:<24}{points:>3}")

    # 2. Authenticate a signed nonce, e.g. from `keybase sign -m <nonce>`
    if message:
        try:
            ok = await gate.authenticate(message, nonce, username)
        except VerificationError:
            print("❌ Signature did not verify")
            return
        print(f"{'✅' if ok else '🚫'} score {'meets' if ok else 'is below'} minimum {gate.min_score}")


if __name__ == "__main__":
    if len(sys.argv) not in (2, 4):
        print(__doc__)
        sys.exit(1)
    asyncio.run(main(*sys.argv[1:]))
