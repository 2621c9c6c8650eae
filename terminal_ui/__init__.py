"""Terminal session package."""
