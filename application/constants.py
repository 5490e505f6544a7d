"""Application-level constants."""

# Pipeline stages (shown as s=<stage> in log lines)
STAGE_OVERRIDES = "overrides"
STAGE_HAZARDS = "hazards"
STAGE_REGULATORY = "regulatory"
STAGE_INGREDIENTS = "ingredients"
STAGE_WRITE = "write"

# Substring that marks an existing partially-hydrogenated-oils record
PHO_MARKER = "partially hydrogenated"
