"""Domain models and value types.

Why:
- Pure, strict data structures (Pydantic v2) live here.
- The domain knows nothing about HTTP, subprocesses or the CLI.
"""
