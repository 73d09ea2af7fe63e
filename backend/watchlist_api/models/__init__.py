from watchlist_api.models.user import User
from watchlist_api.models.watchlist import WatchlistEntry

__all__ = [
    "User",
    "WatchlistEntry",
]
