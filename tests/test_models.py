"""
Tests for the Hero model and its JSON mapping.
"""

import json

import pytest

from heroes.models import Hero
from shared.errors import SerializationError


class TestHeroEquality:
    """Heroes compare by name only."""

    def test_same_name_different_id_is_equal(self) -> None:
        """Test that id is ignored when comparing heroes."""
        assert Hero(id=1, name="Thor") == Hero(id=2, name="Thor")

    def test_name_comparison_is_case_sensitive(self) -> None:
        """Test that names differing only in case are distinct heroes."""
        assert Hero(id=1, name="Thor") != Hero(id=1, name="thor")

    def test_hash_follows_name(self) -> None:
        """Test that heroes with the same name collapse in a set."""
        assert len({Hero(id=1, name="Thor"), Hero(id=2, name="Thor")}) == 1

    def test_not_equal_to_other_types(self) -> None:
        """Test comparison against a non-hero."""
        assert Hero(id=1, name="Thor") != {"id": 1, "name": "Thor"}


class TestHeroDecoding:
    """Test Hero.from_json and Hero.from_dict."""

    def test_decodes_stored_document(self) -> None:
        """Test decoding a well-formed document."""
        hero = Hero.from_json(b'{"id": 42, "name": "Loki"}')
        assert hero.id == 42
        assert hero.name == "Loki"

    def test_missing_fields_default(self) -> None:
        """Test that a missing id becomes 0 and a missing name None."""
        hero = Hero.from_json("{}")
        assert hero.id == 0
        assert hero.name is None

    def test_null_id_defaults_to_zero(self) -> None:
        """Test that an explicit null id behaves like a missing id."""
        assert Hero.from_dict({"id": None, "name": "Thor"}).id == 0

    def test_numeric_string_id_is_coerced(self) -> None:
        """Test that an integral string id is accepted."""
        assert Hero.from_dict({"id": "17", "name": "Thor"}).id == 17

    def test_integral_float_id_is_coerced(self) -> None:
        """Test that 5.0 is accepted as id 5."""
        assert Hero.from_dict({"id": 5.0, "name": "Thor"}).id == 5

    def test_fractional_float_id_is_rejected(self) -> None:
        """Test that only integral floats are coerced."""
        with pytest.raises(SerializationError, match="42.5"):
            Hero.from_dict({"id": 42.5, "name": "Thor"})

    @pytest.mark.parametrize("bad_id", [True, 1.5, "abc", [1], {"a": 1}])
    def test_rejects_non_integer_id(self, bad_id) -> None:
        """Test that ids which are not integers are rejected."""
        with pytest.raises(SerializationError):
            Hero.from_dict({"id": bad_id, "name": "Thor"})

    def test_rejects_non_string_name(self) -> None:
        """Test that a numeric name is rejected."""
        with pytest.raises(SerializationError, match="name"):
            Hero.from_dict({"id": 1, "name": 7})

    def test_rejects_unknown_fields(self) -> None:
        """Test that unrecognized properties fail decoding."""
        with pytest.raises(SerializationError, match="power"):
            Hero.from_dict({"id": 1, "name": "Thor", "power": "hammer"})

    @pytest.mark.parametrize("payload", [b"", b"{not json", b"[1, 2]", b"\xff\xfe", b"null"])
    def test_rejects_malformed_payloads(self, payload: bytes) -> None:
        """Test that malformed or non-object payloads raise SerializationError."""
        with pytest.raises(SerializationError):
            Hero.from_json(payload)


class TestHeroEncoding:
    """Test Hero.to_json and blob_key."""

    def test_blob_key_uses_id(self) -> None:
        """Test the persisted key layout."""
        assert Hero(id=7, name="Loki").blob_key == "7.json"

    def test_to_json_writes_id_and_name(self) -> None:
        """Test the persisted document shape."""
        payload = Hero(id=7, name="Loki").to_json()
        assert isinstance(payload, bytes)
        assert json.loads(payload) == {"id": 7, "name": "Loki"}

    def test_to_json_keeps_non_ascii_names(self) -> None:
        """Test that names are stored as UTF-8 rather than escaped."""
        payload = Hero(id=3, name="Þórr").to_json()
        assert "Þórr".encode("utf-8") in payload
        assert Hero.from_json(payload).name == "Þórr"
