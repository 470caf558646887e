"""uploadref

Parsing and validation of upload references: file names that embed a
canonical UUID pointing at a temporary object in storage.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
