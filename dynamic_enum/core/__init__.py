"""Core building blocks: value entries, the enum registry, config and logging."""
