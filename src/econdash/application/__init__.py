"""Application layer: orchestration and use cases."""
