"""Application layer - demonstration registry and catalog service."""
