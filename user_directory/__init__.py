"""
User Directory Application - root package.

This package contains the FastAPI app entry point (main.py), the users API
routes, the application layer (DTOs, validation, use cases), the domain
model and repository contract, and the MongoDB / in-memory repositories.
"""
