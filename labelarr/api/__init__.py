"""HTTP API for previewing label templates."""
