"""Defines the base exception and warning subclasses used by the ``zxstim`` library."""


class ZXStimError(Exception):
    pass


class InvalidCoordinateError(ZXStimError):
    """Raised when a vertex ``qubit`` or ``row`` coordinate cannot be ordered (NaN)."""


class ZXStimWarning(Warning):
    pass
