"""Contains all the data models used in inputs/outputs"""

from .access_token_type import AccessTokenType
from .client import Client
from .client_summary import ClientSummary
from .grant_type import GrantType
from .resource_set import ResourceSet

__all__ = (
    "AccessTokenType",
    "Client",
    "ClientSummary",
    "GrantType",
    "ResourceSet",
)
