"""Unit tests for token extraction from requests."""

from stackit.interface.api.auth import extract_token


class TestExtractToken:
    """Bearer header and cookie handling."""

    def test_bearer_header(self):
        assert extract_token("Bearer abc.def", None) == "abc.def"

    def test_scheme_is_case_insensitive(self):
        assert extract_token("bearer abc", None) == "abc"

    def test_header_wins_over_cookie(self):
        assert extract_token("Bearer from-header", "from-cookie") == "from-header"

    def test_cookie_used_without_header(self):
        assert extract_token(None, "from-cookie") == "from-cookie"

    def test_non_bearer_header_falls_back_to_cookie(self):
        assert extract_token("Basic dXNlcjpwdw==", "from-cookie") == "from-cookie"

    def test_nothing_present(self):
        assert extract_token(None, None) is None
        assert extract_token("Bearer ", "") is None
