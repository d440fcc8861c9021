"""Index model, ranking and persistence."""
