"""
Error kinds raised at the edges of the simulation core.

Numeric paths inside a tick never raise; these exceptions only report
caller defects (bad arguments, broken construction preconditions).
"""


class FishbowlError(Exception):
    """Base class for fishbowl errors"""
    pass


class InvalidArgumentError(FishbowlError, ValueError):
    """Raised when a caller passes an out-of-contract value (e.g. negative amount)"""
    pass


class PreconditionFailedError(FishbowlError):
    """Raised when an object is constructed in an inconsistent state"""
    pass
