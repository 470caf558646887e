"""End-to-end tests.

Purpose
- Drive the ``uploadref`` command line the way a user would.

Guidelines
- Use Click's CliRunner and isolated temporary directories.
- Assert on exit codes and user-visible output.
"""
