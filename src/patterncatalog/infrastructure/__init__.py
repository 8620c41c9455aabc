"""Infrastructure layer - technical adapters for logging and output."""
