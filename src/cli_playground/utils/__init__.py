"""Shared utilities — logging setup and cross-cutting concerns.

Rules
-----
* No business logic.
* No I/O beyond configuring log handlers.
* Importable by any layer.
"""
