"""
API layer for the User Directory service.

Exposes the /api/users HTTP endpoints.
"""
