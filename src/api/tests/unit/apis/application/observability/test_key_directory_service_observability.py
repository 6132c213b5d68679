"""Unit tests for DefaultKeyDirectoryServiceProbe."""

from apis.application.observability import DefaultKeyDirectoryServiceProbe


class TestDefaultKeyDirectoryServiceProbe:
    def test_key_list_retrieved(self, captured_logs, observation_context):
        observer = DefaultKeyDirectoryServiceProbe().with_context(observation_context)

        observer.key_list_retrieved(api_id="api_1", workspace_id="ws_1", count=2, total=9)

        (entry,) = captured_logs
        assert entry["event"] == "key_list_retrieved"
        assert entry["api_workspace_id"] == "ws_1"
        assert entry["workspace_id"] == "ws_ctx"
        assert entry["total"] == 9

    def test_api_not_found(self, captured_logs, observation_context):
        observer = DefaultKeyDirectoryServiceProbe().with_context(observation_context)

        observer.api_not_found("api_1", "ws_1")

        (entry,) = captured_logs
        assert entry["event"] == "api_not_found"
        assert entry["log_level"] == "info"

    def test_page_size_clamped(self, captured_logs):
        DefaultKeyDirectoryServiceProbe().page_size_clamped(500, 100)

        (entry,) = captured_logs
        assert entry["event"] == "page_size_clamped"
        assert entry["requested"] == 500
        assert entry["applied"] == 100
