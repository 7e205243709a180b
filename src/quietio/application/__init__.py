"""Application layer: reporters and writers."""
