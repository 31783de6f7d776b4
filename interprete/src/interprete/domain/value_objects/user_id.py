"""
UserId value object - opaque caller-asserted identity.
"""

from dataclasses import dataclass

from interprete.domain.exceptions import USER_ID_REQUIRED, InvalidMessageError


@dataclass(frozen=True)
class UserId:
    """
    Identifier a client asserts for itself.

    Any non-empty string is accepted; uniqueness is the caller's concern.

    Raises:
        InvalidMessageError: If value is not a non-empty string
    """

    value: str

    def __post_init__(self):
        if not isinstance(self.value, str) or not self.value:
            raise InvalidMessageError(USER_ID_REQUIRED)

    @classmethod
    def is_valid(cls, value) -> bool:
        return isinstance(value, str) and bool(value)

    def __str__(self) -> str:
        return self.value
