#!/usr/bin/env python3
"""
Script to help configure CORS on the Firebase Storage bucket.
Logs in with the Firebase CLI, then prints the CORS config and the manual
steps to apply it from the Cloud Console or Cloud Shell.
"""
import asyncio
import sys

from storage_cors.auth import ensure_login
from storage_cors.config import BUCKET_NAME, LOGIN_COMMAND, PROJECT_ID, VERBOSE
from storage_cors.instructions import print_instructions

def main(command: str = LOGIN_COMMAND, verbose: bool = VERBOSE) -> int:
    if not asyncio.run(ensure_login(command, verbose=verbose)):
        return 1

    if verbose:
        print(f"✅ Logged in. Instructions for bucket: {BUCKET_NAME}", file=sys.stderr)

    print_instructions(project_id=PROJECT_ID, bucket_name=BUCKET_NAME)
    return 0

if __name__ == "__main__":
    sys.exit(main())
