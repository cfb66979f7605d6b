"""
Unit tests for the resource models.

Tests cover:
- snake_case wire keys and string enum values
- Omission of unset fields
- Pass-through of unmodelled fields
- ResourceSet window handling
"""

import pytest

from ironclad_client.models import (
    AccessTokenType,
    Client,
    ClientSummary,
    GrantType,
    ResourceSet,
)
from ironclad_client.types import UNSET


@pytest.mark.unit
class TestClientModel:
    """Tests for Client.to_dict / Client.from_dict."""

    def test_to_dict_uses_snake_case_keys(self):
        client = Client(
            id="app1",
            post_logout_redirect_uris=["https://app1.example.com/"],
            allow_offline_access=True,
        )

        assert client.to_dict() == {
            "id": "app1",
            "post_logout_redirect_uris": ["https://app1.example.com/"],
            "allow_offline_access": True,
        }

    def test_enums_render_as_symbolic_names(self):
        client = Client(
            id="app1",
            allowed_grant_types=[GrantType.AUTHORIZATION_CODE, GrantType.CLIENT_CREDENTIALS],
            access_token_type=AccessTokenType.REFERENCE,
        )

        data = client.to_dict()

        assert data["allowed_grant_types"] == ["authorization_code", "client_credentials"]
        assert data["access_token_type"] == "reference"
        assert all(isinstance(value, str) for value in data["allowed_grant_types"])

    def test_unset_fields_are_omitted(self):
        data = Client(id="app1").to_dict()

        assert data == {"id": "app1"}
        assert "secret" not in data
        assert "enabled" not in data

    def test_id_is_optional_for_registration(self):
        assert Client(name="Server assigned").to_dict() == {"name": "Server assigned"}

    def test_from_dict_parses_enums(self, sample_client_document):
        client = Client.from_dict(sample_client_document)

        assert client.id == "app1"
        assert client.allowed_grant_types == [GrantType.AUTHORIZATION_CODE]
        assert client.access_token_type is AccessTokenType.JWT
        assert client.require_pkce is True
        assert client.secret is UNSET

    def test_from_dict_keeps_unknown_fields(self, sample_client_document):
        sample_client_document["identity_token_lifetime"] = 300

        client = Client.from_dict(sample_client_document)

        assert client.additional_keys == ["identity_token_lifetime"]
        assert client["identity_token_lifetime"] == 300
        assert client.to_dict()["identity_token_lifetime"] == 300

    def test_unknown_grant_type_is_kept_verbatim(self):
        document = {"id": "svc", "allowed_grant_types": ["delegation", "client_credentials"]}

        client = Client.from_dict(document)

        assert client.allowed_grant_types == ["delegation", GrantType.CLIENT_CREDENTIALS]
        assert client.to_dict() == document

    def test_unknown_access_token_type_is_kept_verbatim(self):
        client = Client.from_dict({"id": "svc", "access_token_type": "opaque"})

        assert client.access_token_type == "opaque"
        assert client.to_dict()["access_token_type"] == "opaque"

    def test_from_dict_rejects_non_string_grant_type(self):
        with pytest.raises(TypeError):
            Client.from_dict({"id": "app1", "allowed_grant_types": [3]})

    def test_from_dict_rejects_non_list_uris(self):
        with pytest.raises(TypeError):
            Client.from_dict({"id": "app1", "redirect_uris": "https://app1.example.com"})

    def test_round_trip_preserves_document(self, sample_client_document):
        assert Client.from_dict(sample_client_document).to_dict() == sample_client_document


@pytest.mark.unit
class TestClientSummaryModel:
    """Tests for ClientSummary."""

    def test_from_dict(self):
        summary = ClientSummary.from_dict({"id": "app1", "name": "Sample App", "enabled": False})

        assert summary.id == "app1"
        assert summary.name == "Sample App"
        assert summary.enabled is False

    def test_from_dict_requires_id(self):
        with pytest.raises(KeyError):
            ClientSummary.from_dict({"name": "Anonymous"})

    def test_from_dict_rejects_empty_id(self):
        with pytest.raises(ValueError):
            ClientSummary.from_dict({"id": ""})


@pytest.mark.unit
class TestResourceSetModel:
    """Tests for ResourceSet."""

    def test_from_dict_keeps_server_order(self):
        data = {
            "start": 0,
            "size": 10,
            "total_size": 3,
            "resources": [{"id": "zeta"}, {"id": "alpha"}, {"id": "mid"}],
        }

        page = ResourceSet.from_dict(data, resource_type=ClientSummary)

        assert [summary.id for summary in page] == ["zeta", "alpha", "mid"]
        assert len(page) == 3
        assert page.total_size == 3

    def test_requested_window_takes_precedence(self):
        data = {"start": 5, "size": 2, "total_size": 7, "resources": [{"id": "a"}, {"id": "b"}]}

        page = ResourceSet.from_dict(data, resource_type=ClientSummary, start=5, size=20)

        assert page.start == 5
        assert page.size == 20
        assert "size" not in page.additional_properties

    def test_missing_window_falls_back_to_payload(self):
        page = ResourceSet.from_dict({"total_size": 0, "resources": []}, resource_type=ClientSummary)

        assert page.start == 0
        assert page.size == 0
        assert page.resources == []

    def test_rejects_more_resources_than_requested(self):
        data = {"total_size": 3, "resources": [{"id": "a"}, {"id": "b"}, {"id": "c"}]}

        with pytest.raises(ValueError, match="only 2 were requested"):
            ResourceSet.from_dict(data, resource_type=ClientSummary, size=2)

    def test_negative_size_is_not_checked_locally(self):
        page = ResourceSet.from_dict({"total_size": 0, "resources": []}, resource_type=ClientSummary, size=-5)

        assert page.size == -5
        assert page.resources == []

    def test_total_reads_total_size(self):
        page = ResourceSet.from_dict({"total_size": 2, "resources": [{"id": "a"}]}, resource_type=ClientSummary)

        assert page.total == page.total_size == 2

    def test_requires_total_size(self):
        with pytest.raises(KeyError):
            ResourceSet.from_dict({"resources": []}, resource_type=ClientSummary)

    def test_to_dict_nests_resources(self):
        page = ResourceSet(start=0, size=20, total_size=1, resources=[ClientSummary(id="app1")])

        assert page.to_dict() == {
            "start": 0,
            "size": 20,
            "total_size": 1,
            "resources": [{"id": "app1"}],
        }
