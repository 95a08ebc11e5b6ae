"""Element-map to document mapping."""
