"""Defines a few core data-structures that are independent of other ``zxstim`` modules."""

from .enums import Pauli as Pauli
from .exceptions import InvalidCoordinateError as InvalidCoordinateError
from .exceptions import ZXStimError as ZXStimError
from .exceptions import ZXStimWarning as ZXStimWarning
