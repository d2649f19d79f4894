"""Clients for the external stores.

Stores handle:
- Redis: cache client handle
- MongoDB: document-store client handle
- Connection state of both, for readiness reporting

Routes never touch the stores directly.
"""
