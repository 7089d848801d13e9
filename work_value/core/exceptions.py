"""
Custom Exceptions - Work Value Calculator
work_value/core/exceptions.py

Data problems (bad numbers, unknown tags) never raise; they degrade to
undefined results or neutral coefficients. These exceptions cover
programming errors only.
"""


class WorkValueException(Exception):
    """Base exception for the valuation engine."""

    pass


class UnsupportedCommuteModeException(WorkValueException):
    """Object passed to the commute model is not a known commute variant."""

    def __init__(self, commute: object):
        self.commute = commute
        super().__init__(
            f"Unsupported commute variant: {type(commute).__name__}"
        )
