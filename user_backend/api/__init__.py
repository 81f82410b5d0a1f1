"""
API layer for the user records backend.

Exposes the user CRUD endpoints (list, create, update, delete) and the
exception handlers that shape every error into the JSON envelope.
"""
