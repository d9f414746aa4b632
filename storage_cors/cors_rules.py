"""
CORS rule descriptor for the Firebase Storage bucket.
Rules use the same JSON shape that `gsutil cors set` and the Cloud Console accept.
"""
import json
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Tuple

@dataclass(frozen=True)
class CorsRule:
    """A single bucket CORS rule."""
    origin: Tuple[str, ...] = ("*",)
    method: Tuple[str, ...] = ("GET", "HEAD", "PUT", "POST", "DELETE")
    max_age_seconds: int = 3600
    response_header: Tuple[str, ...] = (
        "Content-Type",
        "Authorization",
        "x-goog-acl",
        "x-goog-meta-*",
    )

    def to_dict(self) -> Dict[str, Any]:
        """Returns the rule keyed the way Cloud Storage expects it."""
        return {
            "origin": list(self.origin),
            "method": list(self.method),
            "maxAgeSeconds": self.max_age_seconds,
            "responseHeader": list(self.response_header),
        }

DEFAULT_CORS_RULES: Tuple[CorsRule, ...] = (CorsRule(),)

def serialize_cors_rules(rules: Iterable[CorsRule] = DEFAULT_CORS_RULES) -> str:
    """Renders the rules as a cors.json document with 2-space indentation."""
    return json.dumps([rule.to_dict() for rule in rules], indent=2, ensure_ascii=False)
