"""VyFinance datum definitions."""

from .order import ORDER_DEFINITION

__all__ = ["ORDER_DEFINITION"]
