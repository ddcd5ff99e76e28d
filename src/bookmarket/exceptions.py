"""Marketplace-specific failures raised by aggregates and handlers.

Validation problems reuse Protean's ``ValidationError`` (and subclass it where
the caller needs to tell them apart). Conflicts with current state and
authorization failures get their own types so the HTTP layer can map them to
409 and 401 respectively.
"""

from protean.exceptions import ProteanException, ValidationError


class EmptyCart(ValidationError):
    """Checkout was attempted on a cart with no lines."""


class DuplicateReview(ValidationError):
    """The reviewer has already rated this target."""


class InvalidTransition(ProteanException):
    """The requested order status change is not an edge of the lifecycle."""


class OutOfStock(ProteanException):
    """The book has no copies left to sell."""


class Unauthorized(ProteanException):
    """Bad credentials, an unapproved shop, or an actor acting on someone else's data."""
