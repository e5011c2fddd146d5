"""Saltpack message verification through the local keybase client."""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

logger = logging.getLogger(__name__)


class MessageVerifier:
    """Run ``keybase verify`` and compare its output with an expected text.

    keybase exits non-zero when a signature does not verify, so every
    failure mode collapses to ``False`` here.
    """

    def __init__(self, keybase_path: str, timeout: Optional[float] = None):
        self.keybase_path = keybase_path
        self.timeout = timeout

    async def _run(self, *args: str) -> Optional[str]:
        """Run the keybase client; return stdout on exit 0, else None."""
        try:
            proc = await asyncio.create_subprocess_exec(
                self.keybase_path, *args,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except (OSError, ValueError) as e:
            logger.debug("Could not start %s: %s", self.keybase_path, e)
            return None

        try:
            stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError:
            proc.kill()
            await proc.wait()
            logger.debug("%s %s timed out after %ss", self.keybase_path, args[0], self.timeout)
            return None

        if proc.returncode != 0:
            logger.debug("%s %s exited %d: %s", self.keybase_path, args[0], proc.returncode,
                         stderr.decode(errors="replace").strip())
            return None
        try:
            return stdout.decode()
        except UnicodeDecodeError:
            return None

    async def verify(self, message: str, expected_text: str, username: Optional[str] = None) -> bool:
        """True if ``message`` verifies, its content equals ``expected_text``
        exactly and, when ``username`` is given, it was signed by that user."""
        args = ["verify", "-m", message]
        if username:
            args += ["-S", username]

        output = await self._run(*args)
        if not output or not expected_text:
            return False
        return output == expected_text

    async def verify_message_only(self, message: str, expected_text: str) -> bool:
        return await self.verify(message, expected_text)

    async def verify_message_from_identity(self, message: str, expected_text: str, username: str) -> bool:
        return await self.verify(message, expected_text, username)

    async def probe_version(self) -> bool:
        """True if ``keybase --version`` runs successfully."""
        return await self._run("--version") is not None
