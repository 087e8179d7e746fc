"""Service-layer exceptions."""


class FactoryError(Exception):
    """Raised when a creature cannot be spawned."""
