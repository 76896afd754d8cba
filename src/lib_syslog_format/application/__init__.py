"""Application layer: ports describing the formatter collaborators."""
