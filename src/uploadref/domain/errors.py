"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                       File name parsing errors
# ============================================================================


class MalformedNameError(DomainError):
    """Raised when no canonical UUID can be located in a file name."""

    def __init__(self, raw_name: object) -> None:
        super().__init__(f"No canonical UUID found in file name {raw_name!r}.")
        self.raw_name = raw_name
