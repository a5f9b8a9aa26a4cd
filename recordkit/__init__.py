"""Student-record linked lists, a record stack, and small copy, user-lookup and watch utilities."""

__version__ = "0.1.0"

__all__ = [
    "circular_list",
    "double_list",
    "errors",
    "mycp",
    "single_list",
    "stack",
    "users",
    "watch",
]