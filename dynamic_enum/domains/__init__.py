"""Domain registries."""
