"""Entrypoints (inbound adapters) for uploadref.

Expose the library to the outside world: currently the ``uploadref`` CLI.
Parse inputs, call the service layer, and present results.

Dependency rule: may import `uploadref.service_layer` and `uploadref.bootstrap`;
avoid importing `uploadref.adapters` directly.
"""
