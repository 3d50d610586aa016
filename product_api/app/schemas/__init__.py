"""
Pydantic schema definitions for API payloads.

The ``Product`` model doubles as the stored record; its informational
timestamps are private attributes and never cross the wire.
"""
