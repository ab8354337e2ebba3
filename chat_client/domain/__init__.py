"""Pure client-side domain pieces: credentials, endpoints, errors.

These modules carry no HTTP machinery so both services and the smoke runner
can share them.
"""
__all__ = ["credentials", "endpoints", "errors"]
