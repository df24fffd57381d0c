"""
API layer for the account service.

Exposes JSON HTTP endpoints under /api/v1 (auth, password reset, users).
"""
