"""Processing layers: prepare (scan and record) and cook (synthesize and build)."""
