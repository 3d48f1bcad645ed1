"""Tests for AccessToken and SalesforceResourceOwner construction."""

import pytest

from salesforce_auth.errors import MalformedResponseError
from salesforce_auth.resource_owner import SalesforceResourceOwner
from salesforce_auth.token import create_access_token


class TestCreateAccessToken:
    """Tests for building tokens from token responses."""

    def test_minimal_response(self):
        token = create_access_token({"access_token": "T", "id": "https://instance/id/0x1"})

        assert token.access_token == "T"
        assert token.resource_owner_id == "https://instance/id/0x1"
        assert token.refresh_token is None
        assert token.expires is None
        assert token.has_expired() is False
        assert str(token) == "T"

    def test_salesforce_response(self, token_body):
        token = create_access_token(token_body)

        assert token.refresh_token == token_body["refresh_token"]
        assert token.instance_url == "https://yourInstance.salesforce.com"
        assert token.token_type == "Bearer"
        assert token.values == {
            "issued_at": "1278448832702",
            "signature": token_body["signature"],
            "scope": "id api refresh_token",
        }
        assert token.to_dict() == token_body

    def test_owns_a_copy_of_the_response(self, token_body):
        token = create_access_token(token_body)

        token_body["access_token"] = "changed"

        assert token.to_dict()["access_token"] != "changed"

    def test_expires_in(self):
        token = create_access_token({"access_token": "T", "id": "x", "expires_in": 3600}, now=1000)

        assert token.expires == 4600
        assert token.has_expired(now=4599) is False
        assert token.has_expired(now=4600) is True

    def test_expires_as_timestamp(self):
        token = create_access_token({"access_token": "T", "id": "x", "expires": 1900000000}, now=1000)

        assert token.expires == 1900000000

    @pytest.mark.parametrize("key, value", [("expires_in", "abc"), ("expires", "soon"), ("expires_in", [3600])])
    def test_non_numeric_expiry(self, key, value):
        with pytest.raises(MalformedResponseError, match=key):
            create_access_token({"access_token": "T", "id": "x", key: value})

    def test_immutable(self):
        token = create_access_token({"access_token": "T", "id": "x"})

        with pytest.raises(AttributeError):
            token.access_token = "other"

    @pytest.mark.parametrize(
        "body",
        [
            {"access_token": "T"},
            {"access_token": "T", "id": ""},
            {"id": "https://instance/id/0x1"},
            [],
            None,
        ],
    )
    def test_missing_required_fields(self, body):
        with pytest.raises(MalformedResponseError):
            create_access_token(body)


class TestSalesforceResourceOwner:
    """Tests for the resource owner accessors."""

    def test_accessors(self, identity_body):
        owner = SalesforceResourceOwner(identity_body)

        assert owner.id == "005x00000012Q9P"
        assert owner.organization_id == "00Dx0000000BV7z"
        assert owner.username == "jane@example.com"
        assert owner.display_name == "Jane Doe"
        assert owner.nick_name == "jane"
        assert owner.first_name == "Jane"
        assert owner.last_name == "Doe"
        assert owner.email == "jane@example.com"
        assert owner.email_verified is True
        assert owner.locale == "en_US"
        assert owner.language == "en_US"
        assert owner.timezone == "Europe/Berlin"
        assert owner.user_type == "STANDARD"
        assert owner.is_active is True
        assert owner.photos == {"picture": "https://example.com/picture"}
        assert "rest" in owner.urls

    def test_missing_fields(self):
        owner = SalesforceResourceOwner({})

        assert owner.id is None
        assert owner.email is None
        assert owner.is_active is False
        assert owner.urls == {}

    def test_to_dict_is_a_copy(self, identity_body):
        owner = SalesforceResourceOwner(identity_body)

        data = owner.to_dict()
        data["email"] = "changed@example.com"

        assert owner.email == "jane@example.com"

    def test_not_a_mapping(self):
        with pytest.raises(MalformedResponseError):
            SalesforceResourceOwner(["not", "a", "mapping"])
