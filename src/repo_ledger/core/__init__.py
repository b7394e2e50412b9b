"""Repository and identifier management."""
