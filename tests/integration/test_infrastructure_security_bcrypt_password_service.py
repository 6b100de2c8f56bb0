"""Integration tests for BcryptPasswordService.

Tests cover:
- Hash format and salting
- Verification of correct and wrong passwords
- Malformed hashes verify as False
- Cost factor bounds
"""

import pytest

from ipauth.infrastructure.security import BcryptPasswordService


@pytest.mark.integration
class TestBcryptPasswordService:
    def test_hash_has_bcrypt_format(self, password_service):
        password_hash = password_service.hash_password("Abcd1234")

        assert password_hash.startswith("$2b$10$")
        assert len(password_hash) == 60

    def test_hashes_are_salted(self, password_service):
        assert password_service.hash_password("Abcd1234") != password_service.hash_password(
            "Abcd1234"
        )

    def test_verify_correct_password(self, password_service):
        password_hash = password_service.hash_password("Abcd1234")

        assert password_service.verify_password("Abcd1234", password_hash) is True

    def test_verify_wrong_password(self, password_service):
        password_hash = password_service.hash_password("Abcd1234")

        assert password_service.verify_password("abcd1234", password_hash) is False

    def test_malformed_hash_is_false(self, password_service):
        assert password_service.verify_password("Abcd1234", "not-a-hash") is False

    def test_default_cost_factor(self):
        assert BcryptPasswordService().cost_factor == 12

    @pytest.mark.parametrize("cost", [9, 21])
    def test_cost_factor_bounds(self, cost):
        with pytest.raises(ValueError):
            BcryptPasswordService(cost_factor=cost)
