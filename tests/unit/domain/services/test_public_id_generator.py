"""Unit tests for the public id generator."""

import pytest

from scopegrant.domain.services.public_id_generator import (
    BASE62_ALPHABET,
    ROLE_GRANT_PREFIX,
    generate_public_id,
    random_base62,
)


class TestRandomBase62:
    """Test random base62 generation."""

    def test_length_and_alphabet(self):
        value = random_base62(20)
        assert len(value) == 20
        assert set(value) <= set(BASE62_ALPHABET)

    @pytest.mark.parametrize("length", [0, -1])
    def test_invalid_length(self, length):
        with pytest.raises(ValueError, match="length must be positive"):
            random_base62(length)


class TestGeneratePublicId:
    """Test prefixed public id generation."""

    def test_prefixed(self):
        public_id = generate_public_id(ROLE_GRANT_PREFIX)
        prefix, _, body = public_id.partition("_")
        assert prefix == "rg"
        assert len(body) == 20

    def test_custom_length(self):
        assert len(generate_public_id("p", 12)) == len("p_") + 12

    def test_no_collisions(self):
        ids = {generate_public_id(ROLE_GRANT_PREFIX) for _ in range(1000)}
        assert len(ids) == 1000

    def test_empty_prefix(self):
        with pytest.raises(ValueError, match="prefix is required"):
            generate_public_id("")
