"""Small container types: a circular queue, bounded and linked stacks, and linked lists."""

__version__ = "0.1.0"
__all__ = ["bounded_stack", "circular_queue", "dynamic_stack", "linked_list"]