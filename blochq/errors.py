# blochq/errors.py

class InvalidStateError(ValueError):
    """Raised when a custom amplitude pair has zero norm."""

class UnknownGateError(ValueError):
    def __init__(self, name):
        super().__init__(f"Unknown gate {name!r}")
        self.name = name
