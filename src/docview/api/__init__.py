"""HTTP API for docview."""
