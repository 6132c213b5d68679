"""Unit tests for root key secret verification."""

import bcrypt

from iam.application.security import (
    ROOT_KEY_PREFIX_LENGTH,
    extract_prefix,
    verify_root_key_secret,
)


def _bcrypt_hash(secret: str) -> str:
    return bcrypt.hashpw(secret.encode(), bcrypt.gensalt()).decode()


class TestRootKeySecrets:
    def test_extract_prefix(self):
        secret = "lk_root_abcd_0123456789"
        assert extract_prefix(secret) == secret[:ROOT_KEY_PREFIX_LENGTH]
        assert len(extract_prefix(secret)) == 12

    def test_verifies_against_original_secret(self):
        key_hash = _bcrypt_hash("lk_root_secret")

        assert verify_root_key_secret("lk_root_secret", key_hash)
        assert not verify_root_key_secret("lk_root_other", key_hash)

    def test_salted_hashes_of_one_secret_both_verify(self):
        first, second = _bcrypt_hash("same"), _bcrypt_hash("same")

        assert first != second
        assert verify_root_key_secret("same", first)
        assert verify_root_key_secret("same", second)

    def test_malformed_hash_does_not_verify(self):
        assert not verify_root_key_secret("lk_root_secret", "not-a-bcrypt-hash")
