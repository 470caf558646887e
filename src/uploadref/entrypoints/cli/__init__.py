"""The ``uploadref`` command-line interface."""
