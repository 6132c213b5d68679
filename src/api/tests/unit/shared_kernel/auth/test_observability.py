"""Unit tests for DefaultJWTValidatorProbe."""

from shared_kernel.auth import DefaultJWTValidatorProbe


class TestDefaultJWTValidatorProbe:
    def test_token_accepted_keeps_context_user_separate(
        self, captured_logs, observation_context
    ):
        observer = DefaultJWTValidatorProbe().with_context(observation_context)

        observer.token_accepted(user_id="user_1", tenant_id="org_1")

        (entry,) = captured_logs
        assert entry["event"] == "session_token_accepted"
        assert entry["token_user_id"] == "user_1"
        assert entry["token_tenant_id"] == "org_1"
        assert entry["user_id"] == "user_ctx"

    def test_token_rejected(self, captured_logs):
        DefaultJWTValidatorProbe().token_rejected(reason="Token expired")

        (entry,) = captured_logs
        assert entry["event"] == "session_token_rejected"
        assert entry["log_level"] == "warning"

    def test_signing_key_events(self, captured_logs):
        observer = DefaultJWTValidatorProbe()

        observer.signing_keys_refreshed(key_count=2)
        observer.signing_keys_cached()
        observer.signing_keys_unavailable(error="timeout")

        assert [entry["event"] for entry in captured_logs] == [
            "oidc_signing_keys_refreshed",
            "oidc_signing_keys_cached",
            "oidc_signing_keys_unavailable",
        ]
        assert captured_logs[2]["log_level"] == "error"
