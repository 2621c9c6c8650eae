"""Core logic for the artwork browser: data models, page fetching and
cross-page selection tracking."""
