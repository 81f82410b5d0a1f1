"""
User records backend: root package.

FastAPI application (main.py) exposing create/read/update/delete over user
records stored in MongoDB, organized as domain, application, infrastructure
and API layers wired together by a small DI container.
"""
