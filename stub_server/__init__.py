"""In-memory stand-in for the marketplace REST API (local dev and contract tests)."""
