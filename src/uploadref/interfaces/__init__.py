"""Interfaces (ports) consumed by the service layer."""
