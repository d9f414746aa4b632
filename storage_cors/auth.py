"""
Best-effort Firebase CLI login.

Runs the non-interactive login command once and reports whether it succeeded.
The token the command prints is passed straight through to the terminal and
is not captured.
"""
import asyncio
import sys
from typing import Optional, TextIO

from storage_cors.config import LOGIN_COMMAND

LOGIN_FAILURE_MESSAGES = (
    "Please run: firebase login",
    "Then try this script again",
)

async def attempt_login(command: str = LOGIN_COMMAND, verbose: bool = False) -> bool:
    """
    Runs the login command through the shell and waits for it to finish.

    Args:
        command: Shell command to run
        verbose: Print progress lines to stderr

    Returns:
        True if the command exited with status 0, False otherwise
    """
    if verbose:
        print(f"[Auth] Running: {command}", file=sys.stderr)

    try:
        process = await asyncio.create_subprocess_shell(command)
    except OSError as e:
        if verbose:
            print(f"[Auth] Could not start login command: {e}", file=sys.stderr)
        return False

    returncode = await process.wait()

    if verbose:
        print(f"[Auth] Login command exited with status {returncode}", file=sys.stderr)
    return returncode == 0

def report_login_failure(stream: Optional[TextIO] = None):
    """Tells the operator how to log in manually."""
    stream = stream or sys.stderr
    for line in LOGIN_FAILURE_MESSAGES:
        print(line, file=stream)

async def ensure_login(command: str = LOGIN_COMMAND, verbose: bool = False) -> bool:
    """Attempts the login and prints guidance to stderr if it fails."""
    if await attempt_login(command, verbose=verbose):
        return True
    report_login_failure()
    return False
