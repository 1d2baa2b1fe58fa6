"""
Exception types raised on precondition failures.

All failures derive from ``ValueError`` so that callers validating inputs with
``except ValueError`` keep working.
"""

from __future__ import annotations


class ProbabilityError(ValueError):
    """
    Base class for invalid-input failures in this package.
    """


class InvalidProbabilityVectorError(ProbabilityError):
    """
    A mass vector is not a valid probability distribution.
    """


class OutOfRangeError(ProbabilityError):
    """
    An argument lies outside the domain of the requested operation.
    """
