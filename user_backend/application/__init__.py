"""Application layer: request/response DTOs, services and use cases."""
