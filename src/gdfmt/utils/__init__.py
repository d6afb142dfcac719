"""Shared utilities: logging setup and cross-cutting concerns.

Rules
-----
* No business logic.
* No user-facing output.
* Importable by any layer.
"""
