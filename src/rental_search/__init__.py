"""
rental_search – in-memory room search, filtering and relevance ranking.

Import path convention::

    from rental_search.application.search import SearchController, filter_rooms
    from rental_search.kernel.types import Room, RoomStatus, TenantSummary
    from rental_search.kernel.time import AsyncioTimerScheduler
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
