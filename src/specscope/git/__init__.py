"""Git access for historical document trees."""

from specscope.git.ops import SpecRepository

__all__ = ["SpecRepository"]
