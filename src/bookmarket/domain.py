"""Bookmarket bounded context: the campus book marketplace.

Shops list school books, students browse and order them, shops move orders
through their lifecycle, and every transition leaves a notification behind.
Orders, carts and stock live in a single domain so that a checkout commits
its orders, stock decrements and cart clearing in one unit of work.
"""

import structlog
from protean.domain import Domain

bookmarket = Domain(name="bookmarket")

logger = structlog.get_logger(__name__)
