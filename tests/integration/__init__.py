"""Integration tests.

Purpose
- Exercise real interactions with the local filesystem.

Guidelines
- Use pytest's tmp_path for every storage root; never touch the user's files.
- Mark as 'integration' and keep them slower but reliable.
"""
