"""Exceptions raised by ModelConventions.

Only argument validation raises from inside the package. Errors raised by a
user's convention while it is being applied pass through untouched.
"""


class ModelConventionError(Exception):
    """Base class for all ModelConventions errors."""
    pass


class InvalidArgumentError(ModelConventionError, ValueError):
    """Raised when a required argument is None.

    Subclasses ValueError so callers that already guard against bad
    arguments keep working.

    Attributes:
        argument_name: Name of the offending parameter
    """

    def __init__(self, argument_name: str):
        self.argument_name = argument_name
        super().__init__(f"{argument_name} must not be None")


def require(value, argument_name: str):
    """Return value unchanged, raising InvalidArgumentError if it is None."""
    if value is None:
        raise InvalidArgumentError(argument_name)
    return value
