from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    """
    Audience selected in the navbar.

    This is a display toggle only: it decides whether the upload control is
    shown and nothing else. Save and Load behave the same for every role.
    """

    RETAILERS = "retailers"
    SUPPLIERS = "suppliers"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @property
    def can_upload(self) -> bool:
        return self is Role.SUPPLIERS

    @classmethod
    def parse(cls, value: object, default: Optional[Role] = None) -> Role:
        try:
            return cls(value)
        except ValueError:
            if default is None:
                raise
            return default
