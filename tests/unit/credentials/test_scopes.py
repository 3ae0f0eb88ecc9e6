"""Tests for the scope catalog."""

from bearer_grant.credentials.scopes import (
    CustomScope,
    Scope,
    resolve_scope,
    scope_from_name,
)


class TestResolveScope:
    """Tests for turning scope selections into wire strings."""

    def test_catalog_member(self) -> None:
        assert (
            resolve_scope(Scope.CLOUD_VISION)
            == "https://www.googleapis.com/auth/cloud-vision"
        )

    def test_bare_word_members(self) -> None:
        assert resolve_scope(Scope.OPENID) == "openid"
        assert resolve_scope(Scope.EMAIL) == "email"
        assert resolve_scope(Scope.PROFILE) == "profile"

    def test_custom_scope(self) -> None:
        assert resolve_scope(CustomScope("urn:my:scope")) == "urn:my:scope"

    def test_plain_string(self) -> None:
        scope = "https://example.test/scope"
        assert resolve_scope(scope) == scope

    def test_empty_custom_scope_kept(self) -> None:
        assert resolve_scope(CustomScope("")) == ""

    def test_multiple_joined_in_order(self) -> None:
        result = resolve_scope([Scope.OPENID, CustomScope("x"), "email"])
        assert result == "openid x email"

    def test_duplicates_dropped(self) -> None:
        result = resolve_scope([Scope.EMAIL, "email", Scope.OPENID])
        assert result == "email openid"


class TestScopeFromName:
    """Tests for catalog lookup by symbolic name."""

    def test_known_name(self) -> None:
        assert scope_from_name("CLOUD_VISION") is Scope.CLOUD_VISION

    def test_case_insensitive(self) -> None:
        assert scope_from_name("bigquery") is Scope.BIGQUERY

    def test_unknown_name_is_custom(self) -> None:
        url = "https://www.googleapis.com/auth/adwords"
        assert scope_from_name(url) == CustomScope(url)
