# comments in English; reST docstrings strict
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Principal:
    """
    Authenticated caller produced by the bearer-token gate.

    Views receive it as an explicit ``principal`` argument and pass it down to
    services; it is the only trusted source of "who is asking".

    :param user_id: Subject claim of the verified token.
    :type user_id: str
    """

    user_id: str
