"""Repository exports for convenient imports across the service layer."""

from __future__ import annotations

from .user import UserRepository
from .watchlist import WatchlistRepository

__all__ = [
    "UserRepository",
    "WatchlistRepository",
]
