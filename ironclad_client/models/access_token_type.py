from enum import Enum


class AccessTokenType(str, Enum):
    JWT = "jwt"
    REFERENCE = "reference"

    def __str__(self) -> str:
        return str(self.value)
