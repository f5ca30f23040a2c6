#!/usr/bin/env python3
"""
Basic navigation example showing how to act on a subset of a JSON document.

This example demonstrates:
- Writing a custom action (masking selected values in a report)
- The one-call helpers for extraction, copying and validation
- Skipping broken paths with a failure policy
"""

import json
import sys
from pathlib import Path

# Add parent directory to path for development
sys.path.insert(0, str(Path(__file__).parent.parent))

from jsonnav import (
    JSONNavigator,
    DefaultNavigateAction,
    ContinueOnErrorsPolicy,
    copy_paths,
    extract_values,
    missing_paths,
)


DOCUMENT = {
    "user": {"name": "Ada", "email": "ada@example.com", "password": "s3cret"},
    "sessions": [
        {"ip": "10.0.0.1", "token": "abc"},
        {"ip": "10.0.0.2", "token": "def"},
    ],
    "matrix": [[1, 2], [3, 4]],
}


class SecretReporter(DefaultNavigateAction):
    """Collects the location of every secret so it can be masked in a report."""

    def __init__(self, policy=None):
        super().__init__(policy)
        self.found = []

    def on_object_leaf(self, cursor, value):
        self.found.append((cursor.origin(), "*" * len(str(value))))


def main():
    """Run the examples against DOCUMENT or a JSON file given on the command line."""
    if len(sys.argv) > 1:
        document = json.loads(Path(sys.argv[1]).read_text())
    else:
        document = DOCUMENT

    print("Extracted values:")
    for path, values in extract_values(document, ["user.name", "sessions.ip"]).items():
        print(f"  {path}: {values}")

    print("\nPublic copy:")
    print(json.dumps(copy_paths(document, ["user.name", "sessions.ip"], strict=False), indent=2))

    print("\nMissing paths:", missing_paths(document, ["user.name", "user.phone"]))

    # "matrix" holds arrays inside an array, which cannot be navigated.
    # The policy warns on stderr and keeps going with the next path.
    reporter = SecretReporter(policy=ContinueOnErrorsPolicy())
    JSONNavigator(reporter, ["user.password", "matrix.x", "sessions.token"]).navigate(document)

    print("\nSecrets:")
    for path, masked in reporter.found:
        print(f"  {path} = {masked}")


if __name__ == "__main__":
    main()
