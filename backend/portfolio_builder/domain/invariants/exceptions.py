class InvariantViolation(ValueError):
    """Raised when a portfolio document breaks a domain rule."""
