"""Domain layer - pattern mechanics grouped by category."""
