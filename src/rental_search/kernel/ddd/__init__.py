"""Kernel DDD – specification building blocks."""
from rental_search.kernel.ddd.specification import AllOf, BaseSpecification

__all__ = ["AllOf", "BaseSpecification"]
