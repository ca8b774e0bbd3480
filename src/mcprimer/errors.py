"""Error types raised by mcprimer."""


class InvalidArgument(ValueError):
    """Raised for malformed sample counts or experiment parameters.

    Exceptions raised inside a trial generator or scorer are never wrapped
    in this type; they reach the caller unmodified.
    """
