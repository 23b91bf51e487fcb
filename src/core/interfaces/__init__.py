"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- The pipeline depends on the capability, not on `subprocess`.
"""
