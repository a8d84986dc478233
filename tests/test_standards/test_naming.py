"""Tests for serialization-key naming strategies."""

import pytest

from fieldgen.standards.naming import get_naming_strategy, to_lower_camel, to_snake, to_upper_camel
from fieldgen.utils.exceptions import ConfigError


def test_camel_cases():
    assert to_lower_camel("user_id") == "userId"
    assert to_upper_camel("user_id") == "UserId"
    assert to_lower_camel("id") == "id"


def test_snake_case():
    assert to_snake("UserID") == "user_id"
    assert to_snake("createdAt") == "created_at"
    assert to_snake("already_snake") == "already_snake"


def test_identity_is_default():
    assert get_naming_strategy(None)("Mixed_Case") == "Mixed_Case"


def test_unknown_strategy():
    with pytest.raises(ConfigError, match="Unknown json tag naming strategy"):
        get_naming_strategy("kebab")
