from __future__ import annotations

"""
Domain Constants.

Centralizes application identity, versioning and the fixed tokens used
to compose rendered tree lines.
"""

APP_NAME = "ByteTree"
APP_VERSION = "1.0.0"
CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE RENDERING TOKENS
# -----------------------------------------------------------------------------

BRANCH = "├─ "
LAST_BRANCH = "└─ "
INDENT_UNIT = "│  "
SIZE_UNIT = "bytes"
NEW_LINE = "\n"
