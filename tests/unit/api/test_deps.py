"""
Tests for API dependency functions.
"""

from unittest.mock import MagicMock

import pytest


class TestDependencies:
    def test_get_settings_reads_app_state(self, test_settings):
        from src.api.deps import get_settings

        request = MagicMock()
        request.app.state.settings = test_settings

        assert get_settings(request) is test_settings

    def test_get_chat_service_reads_app_state(self):
        from src.api.deps import get_chat_service

        request = MagicMock()
        service = object()
        request.app.state.chat_service = service

        assert get_chat_service(request) is service

    def test_get_chat_service_before_startup_raises(self):
        from src.api.deps import get_chat_service

        request = MagicMock()
        request.app.state.chat_service = None

        with pytest.raises(RuntimeError, match="not initialized"):
            get_chat_service(request)
