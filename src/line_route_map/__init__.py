"""Road-following route rendering for transit lines."""
