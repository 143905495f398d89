"""Credit data package: TMDB extraction, payload types and aggregation."""
