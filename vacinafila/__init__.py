"""Vaccination slot queues with a console menu, and a stack-based word reverser."""

__version__ = "0.1.0"
__all__ = ["bounded_queue", "stack", "reverse", "scheduler"]