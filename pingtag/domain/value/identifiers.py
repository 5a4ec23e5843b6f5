"""Strongly typed identifiers for pingtag domain entities.

Chat platforms hand out numeric user identities, so identifiers wrap ``int``.
"""

from typing import NewType

UserId = NewType("UserId", int)
