"""Wobo - user account API.

Presentation (HTTP API, CLI) and runtime wiring for the identity
packages ``wobo_identity``, ``wobo_auth`` and ``wobo_config``.
"""
