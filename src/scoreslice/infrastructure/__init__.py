"""Infrastructure layer — reading datasets from disk."""
