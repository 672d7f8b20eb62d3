"""Core interfaces/abstractions.

Why:
- Defines contracts (Protocol) implemented by concrete adapters.
- Inverts dependencies: services depend on abstractions, not on httpx.
"""
