from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any, TypeVar, cast

from attrs import define as _attrs_define
from attrs import field as _attrs_field

from ..models.access_token_type import AccessTokenType
from ..models.grant_type import GrantType
from ..types import UNSET, Unset

E = TypeVar("E", bound=Enum)
T = TypeVar("T", bound="Client")


def _parse_enum(enum_type: type[E], data: object) -> E | str:
    if not isinstance(data, str):
        raise TypeError(f"expected a string for {enum_type.__name__}, got {type(data).__name__}")
    try:
        return enum_type(data)
    except ValueError:
        return data


@_attrs_define
class Client:
    """A client application registered with the Ironclad server.

    Only ``id`` is interpreted by this package. Every other field is payload
    handed to the server as-is; keys the server returns that are not modelled
    here are kept in ``additional_properties`` and sent back on modify.

    Example:
        {'id': 'app1', 'name': 'Sample App', 'allowed_grant_types': ['authorization_code'],
            'redirect_uris': ['https://app1.example.com/callback'], 'allowed_scopes': ['openid', 'profile'],
            'access_token_type': 'jwt', 'require_pkce': True, 'enabled': True}

    Attributes:
        id (str | Unset): Unique client identifier. Optional on register when the server assigns it.
        name (str | Unset): Display name
        secret (str | Unset): Client secret
        allowed_cors_origins (list[str] | Unset):
        redirect_uris (list[str] | Unset):
        post_logout_redirect_uris (list[str] | Unset):
        allowed_scopes (list[str] | Unset):
        allowed_grant_types (list[GrantType | str] | Unset): Grant types the server does not list in GrantType
            are kept as plain strings.
        access_token_type (AccessTokenType | str | Unset): Type of access token issued to this client.
        allow_access_tokens_via_browser (bool | Unset):
        allow_offline_access (bool | Unset):
        require_client_secret (bool | Unset):
        require_pkce (bool | Unset):
        require_consent (bool | Unset):
        enabled (bool | Unset):
    """

    id: str | Unset = UNSET
    name: str | Unset = UNSET
    secret: str | Unset = UNSET
    allowed_cors_origins: list[str] | Unset = UNSET
    redirect_uris: list[str] | Unset = UNSET
    post_logout_redirect_uris: list[str] | Unset = UNSET
    allowed_scopes: list[str] | Unset = UNSET
    allowed_grant_types: list[GrantType | str] | Unset = UNSET
    access_token_type: AccessTokenType | str | Unset = UNSET
    allow_access_tokens_via_browser: bool | Unset = UNSET
    allow_offline_access: bool | Unset = UNSET
    require_client_secret: bool | Unset = UNSET
    require_pkce: bool | Unset = UNSET
    require_consent: bool | Unset = UNSET
    enabled: bool | Unset = UNSET
    additional_properties: dict[str, Any] = _attrs_field(init=False, factory=dict)

    def to_dict(self) -> dict[str, Any]:
        id = self.id

        name = self.name

        secret = self.secret

        allowed_cors_origins: list[str] | Unset = UNSET
        if not isinstance(self.allowed_cors_origins, Unset):
            allowed_cors_origins = list(self.allowed_cors_origins)

        redirect_uris: list[str] | Unset = UNSET
        if not isinstance(self.redirect_uris, Unset):
            redirect_uris = list(self.redirect_uris)

        post_logout_redirect_uris: list[str] | Unset = UNSET
        if not isinstance(self.post_logout_redirect_uris, Unset):
            post_logout_redirect_uris = list(self.post_logout_redirect_uris)

        allowed_scopes: list[str] | Unset = UNSET
        if not isinstance(self.allowed_scopes, Unset):
            allowed_scopes = list(self.allowed_scopes)

        allowed_grant_types: list[str] | Unset = UNSET
        if not isinstance(self.allowed_grant_types, Unset):
            allowed_grant_types = []
            for allowed_grant_types_item_data in self.allowed_grant_types:
                allowed_grant_types_item = str(allowed_grant_types_item_data)
                allowed_grant_types.append(allowed_grant_types_item)

        access_token_type: str | Unset = UNSET
        if not isinstance(self.access_token_type, Unset):
            access_token_type = str(self.access_token_type)

        allow_access_tokens_via_browser = self.allow_access_tokens_via_browser

        allow_offline_access = self.allow_offline_access

        require_client_secret = self.require_client_secret

        require_pkce = self.require_pkce

        require_consent = self.require_consent

        enabled = self.enabled

        field_dict: dict[str, Any] = {}
        field_dict.update(self.additional_properties)
        if id is not UNSET:
            field_dict["id"] = id
        if name is not UNSET:
            field_dict["name"] = name
        if secret is not UNSET:
            field_dict["secret"] = secret
        if allowed_cors_origins is not UNSET:
            field_dict["allowed_cors_origins"] = allowed_cors_origins
        if redirect_uris is not UNSET:
            field_dict["redirect_uris"] = redirect_uris
        if post_logout_redirect_uris is not UNSET:
            field_dict["post_logout_redirect_uris"] = post_logout_redirect_uris
        if allowed_scopes is not UNSET:
            field_dict["allowed_scopes"] = allowed_scopes
        if allowed_grant_types is not UNSET:
            field_dict["allowed_grant_types"] = allowed_grant_types
        if access_token_type is not UNSET:
            field_dict["access_token_type"] = access_token_type
        if allow_access_tokens_via_browser is not UNSET:
            field_dict["allow_access_tokens_via_browser"] = allow_access_tokens_via_browser
        if allow_offline_access is not UNSET:
            field_dict["allow_offline_access"] = allow_offline_access
        if require_client_secret is not UNSET:
            field_dict["require_client_secret"] = require_client_secret
        if require_pkce is not UNSET:
            field_dict["require_pkce"] = require_pkce
        if require_consent is not UNSET:
            field_dict["require_consent"] = require_consent
        if enabled is not UNSET:
            field_dict["enabled"] = enabled

        return field_dict

    @classmethod
    def from_dict(cls: type[T], src_dict: Mapping[str, Any]) -> T:
        d = dict(src_dict)
        id = cast(str | Unset, d.pop("id", UNSET))

        name = cast(str | Unset, d.pop("name", UNSET))

        secret = cast(str | Unset, d.pop("secret", UNSET))

        def _parse_str_list(data: object) -> list[str] | Unset:
            if isinstance(data, Unset) or data is None:
                return UNSET
            if not isinstance(data, list):
                raise TypeError(f"expected a list, got {type(data).__name__}")
            return cast(list[str], data)

        allowed_cors_origins = _parse_str_list(d.pop("allowed_cors_origins", UNSET))

        redirect_uris = _parse_str_list(d.pop("redirect_uris", UNSET))

        post_logout_redirect_uris = _parse_str_list(d.pop("post_logout_redirect_uris", UNSET))

        allowed_scopes = _parse_str_list(d.pop("allowed_scopes", UNSET))

        _allowed_grant_types = _parse_str_list(d.pop("allowed_grant_types", UNSET))
        allowed_grant_types: list[GrantType | str] | Unset = UNSET
        if not isinstance(_allowed_grant_types, Unset):
            allowed_grant_types = []
            for allowed_grant_types_item_data in _allowed_grant_types:
                allowed_grant_types_item = _parse_enum(GrantType, allowed_grant_types_item_data)
                allowed_grant_types.append(allowed_grant_types_item)

        _access_token_type = d.pop("access_token_type", UNSET)
        access_token_type: AccessTokenType | str | Unset
        if isinstance(_access_token_type, Unset) or _access_token_type is None:
            access_token_type = UNSET
        else:
            access_token_type = _parse_enum(AccessTokenType, _access_token_type)

        allow_access_tokens_via_browser = cast(bool | Unset, d.pop("allow_access_tokens_via_browser", UNSET))

        allow_offline_access = cast(bool | Unset, d.pop("allow_offline_access", UNSET))

        require_client_secret = cast(bool | Unset, d.pop("require_client_secret", UNSET))

        require_pkce = cast(bool | Unset, d.pop("require_pkce", UNSET))

        require_consent = cast(bool | Unset, d.pop("require_consent", UNSET))

        enabled = cast(bool | Unset, d.pop("enabled", UNSET))

        client = cls(
            id=id,
            name=name,
            secret=secret,
            allowed_cors_origins=allowed_cors_origins,
            redirect_uris=redirect_uris,
            post_logout_redirect_uris=post_logout_redirect_uris,
            allowed_scopes=allowed_scopes,
            allowed_grant_types=allowed_grant_types,
            access_token_type=access_token_type,
            allow_access_tokens_via_browser=allow_access_tokens_via_browser,
            allow_offline_access=allow_offline_access,
            require_client_secret=require_client_secret,
            require_pkce=require_pkce,
            require_consent=require_consent,
            enabled=enabled,
        )

        client.additional_properties = d
        return client

    @property
    def additional_keys(self) -> list[str]:
        return list(self.additional_properties.keys())

    def __getitem__(self, key: str) -> Any:
        return self.additional_properties[key]

    def __setitem__(self, key: str, value: Any) -> None:
        self.additional_properties[key] = value

    def __delitem__(self, key: str) -> None:
        del self.additional_properties[key]

    def __contains__(self, key: str) -> bool:
        return key in self.additional_properties
