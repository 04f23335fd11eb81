"""Local configuration for edtr."""

from __future__ import annotations

import os


DEFAULT_SCHEMA_REVISION = "v2"
# Root node is depth 1; each nested node or markup element adds one.
DEFAULT_MAX_DEPTH = 128

EDTR_SCHEMA_REVISION = os.getenv("EDTR_SCHEMA_REVISION", DEFAULT_SCHEMA_REVISION).strip().lower()
EDTR_MAX_DEPTH = int(os.getenv("EDTR_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
