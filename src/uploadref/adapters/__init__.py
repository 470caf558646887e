"""Concrete adapters for uploadref's interfaces.

Storage backends live in ``uploadref.adapters.storage``; the redactor used
to scrub URLs before logging lives in ``uploadref.adapters.redactor``.
"""
