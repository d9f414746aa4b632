"""
Manual CORS setup instructions for the Firebase Storage bucket.
"""
import sys
from typing import Iterable, List, Optional, TextIO

from storage_cors.config import BUCKET_NAME, PROJECT_ID
from storage_cors.cors_rules import DEFAULT_CORS_RULES, CorsRule, serialize_cors_rules

CONSOLE_URL = "https://console.cloud.google.com"
CORS_FILE_NAME = "cors.json"

def _console_steps(project_id: str, bucket_name: str) -> List[str]:
    return [
        "Method 1: Google Cloud Console",
        f"1. Go to: {CONSOLE_URL}/storage/browser?project={project_id}",
        f"2. Click on your bucket: {bucket_name}",
        '3. Go to "Configuration" tab',
        '4. Find "CORS configuration" section',
        '5. Click "Edit" and paste the CORS config above',
        '6. Click "Save"',
    ]

def _cloud_shell_steps(cors_json: str, bucket_name: str) -> List[str]:
    # The heredoc body must stay unindented so cors.json is exactly the config above
    return [
        "Method 2: Cloud Shell (recommended)",
        f"1. Go to: {CONSOLE_URL}",
        "2. Click the Cloud Shell icon (>_) at the top right",
        "3. Run these commands:",
        f"   cat > {CORS_FILE_NAME} <<EOF",
        cors_json,
        "   EOF",
        f"   gsutil cors set {CORS_FILE_NAME} gs://{bucket_name}",
        f"   gsutil cors get gs://{bucket_name}",
    ]

def build_instructions(rules: Iterable[CorsRule] = DEFAULT_CORS_RULES,
                       project_id: str = PROJECT_ID,
                       bucket_name: str = BUCKET_NAME) -> str:
    """
    Builds the full instruction text.

    The serialized rules appear twice: once for pasting into the console and
    once inside the Cloud Shell heredoc. Both copies come from a single
    serialization so they are always identical.
    """
    cors_json = serialize_cors_rules(rules)

    lines = ["CORS Configuration to apply:", cors_json]
    lines += ["", "Please configure CORS manually using one of these methods:", ""]
    lines += _console_steps(project_id, bucket_name)
    lines += [""]
    lines += _cloud_shell_steps(cors_json, bucket_name)
    return "\n".join(lines) + "\n"

def print_instructions(rules: Iterable[CorsRule] = DEFAULT_CORS_RULES,
                       project_id: str = PROJECT_ID,
                       bucket_name: str = BUCKET_NAME,
                       stream: Optional[TextIO] = None):
    """Writes the instructions to stdout."""
    stream = stream or sys.stdout
    stream.write(build_instructions(rules, project_id, bucket_name))
    stream.flush()
