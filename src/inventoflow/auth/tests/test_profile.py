"""Tests for profile derivation."""

import pytest

from src.inventoflow.auth.exceptions import MissingAttributeError
from src.inventoflow.auth.profile import DEFAULT_AVATAR, derive_profile


@pytest.mark.parametrize(
    "email, expected_name",
    [
        ("jane@example.com", "jane"),
        ("first.last+tag@sub.example.org", "first.last+tag"),
        ("odd@name@example.com", "odd"),
        ("no-at-sign", "no-at-sign"),
    ],
)
def test_name_defaults_to_email_local_part(email: str, expected_name: str):
    """Name is the email up to its first '@' when no name attribute exists."""
    profile = derive_profile({"email": email})

    assert profile.name == expected_name
    assert profile.email == email


def test_name_attribute_used_verbatim():
    """A provided name attribute wins over the email local-part."""
    profile = derive_profile({"email": "jane@example.com", "name": "  Jane Q. Doe "})

    assert profile.name == "  Jane Q. Doe "


def test_empty_name_attribute_falls_back_to_email():
    profile = derive_profile({"email": "jane@example.com", "name": ""})

    assert profile.name == "jane"


def test_avatar_is_fixed_placeholder():
    first = derive_profile({"email": "a@example.com"})
    second = derive_profile({"email": "b@example.com", "name": "B"})

    assert first.avatar == second.avatar == DEFAULT_AVATAR
    assert DEFAULT_AVATAR.startswith("data:image/svg+xml")


@pytest.mark.parametrize("attributes", [{}, {"name": "Jane"}, {"email": ""}])
def test_missing_email_raises(attributes: dict[str, str]):
    """Missing email is an explicit, checked failure."""
    with pytest.raises(MissingAttributeError) as exc_info:
        derive_profile(attributes)

    assert exc_info.value.attribute == "email"
