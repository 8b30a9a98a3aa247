"""Fixed-capacity stacks and queues, shared-pool stacks and stack algorithms."""

__version__ = "0.1.0"

__all__ = ["algorithms", "array_queue", "array_stack", "nstack"]