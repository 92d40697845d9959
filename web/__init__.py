"""Web API for the n-gram suggestion model."""
