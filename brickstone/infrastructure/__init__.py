"""Infrastructure layer - adapters for config, storage, mail and time."""
