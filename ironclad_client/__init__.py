"""A client library for managing client registrations on an Ironclad server"""

from .client import ApiClient, AuthenticatedApiClient
from .errors import CancellationFailure, IroncladError, RequestFailure, SerializationFailure
from .ironclad import IroncladClient
from .models import AccessTokenType, Client, ClientSummary, GrantType, ResourceSet

__all__ = (
    "AccessTokenType",
    "ApiClient",
    "AuthenticatedApiClient",
    "CancellationFailure",
    "Client",
    "ClientSummary",
    "GrantType",
    "IroncladClient",
    "IroncladError",
    "RequestFailure",
    "ResourceSet",
    "SerializationFailure",
)
