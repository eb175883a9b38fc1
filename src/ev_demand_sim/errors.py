"""Exceptions raised by the demand engine.

Out-of-range operator input is *not* an exception: the validator reports it
as per-field messages.  These types signal a caller that skipped validation.
"""


class DemandSimulatorError(Exception):
    """Base class for engine errors."""


class DomainError(DemandSimulatorError, ValueError):
    """A divisor (charging power or energy per visit) is zero, negative or not finite."""
