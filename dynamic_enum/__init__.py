"""dynamic_enum: enum-like registries whose members are partly loaded at runtime."""

__version__ = "0.1.0"
