from enum import Enum


class GrantType(str, Enum):
    AUTHORIZATION_CODE = "authorization_code"
    CLIENT_CREDENTIALS = "client_credentials"
    DEVICE_CODE = "urn:ietf:params:oauth:grant-type:device_code"
    HYBRID = "hybrid"
    IMPLICIT = "implicit"
    PASSWORD = "password"

    def __str__(self) -> str:
        return str(self.value)
