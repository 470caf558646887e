"""Contract tests.

Purpose
- Enforce the behavior every implementation of a port must share.

Guidelines
- Parametrize fixtures over all implementations (memory, local filesystem).
- Assert only observable behavior of the port, never adapter internals.
"""
