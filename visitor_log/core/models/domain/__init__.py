"""Domain models for the visitor log.

The only entity is :class:`Visitor`, one sign-in/sign-out session. Records are
immutable; a sign-out produces a new copy carrying the logout timestamp.
"""

from .models import Visitor, utc_now

__all__ = ["Visitor", "utc_now"]
