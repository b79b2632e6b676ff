"""Exception types raised at the boundaries of physlab."""


class PhyslabError(Exception):
    """Base class for all physlab errors."""


class InvalidParameterError(PhyslabError, ValueError):
    """A parameter is outside the physical domain of the model (e.g. inertia <= 0)."""

    def __init__(self, name: str, value: object, reason: str = "") -> None:
        self.name = name
        self.value = value
        self.reason = reason
        msg = f"invalid parameter {name}={value!r}"
        if reason:
            msg += f": {reason}"
        super().__init__(msg)
