"""Application layer – export use case."""
