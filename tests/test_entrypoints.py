"""
tests/test_entrypoints.py

Tests for the command-line entry points: the server launcher and the
SMTP diagnostic.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from formrelay import __main__ as server_main
from formrelay import check_mail
from formrelay.core.exceptions import ConfigurationError, DeliveryError


class TestServerMain:

    def test_missing_configuration_exits_without_serving(self) -> None:
        with patch.object(server_main, "load_settings", side_effect=ConfigurationError("Missing SMTP_HOST")), \
                patch.object(server_main.uvicorn, "run") as run:
            assert server_main.main() == 1

        run.assert_not_called()

    def test_runs_uvicorn_on_configured_port(self, settings) -> None:
        settings.port = 4321

        with patch.object(server_main, "load_settings", return_value=settings), \
                patch.object(server_main, "create_app") as create_app, \
                patch.object(server_main.uvicorn, "run") as run:
            assert server_main.main() == 0

        create_app.assert_called_once_with(settings)
        run.assert_called_once_with(create_app.return_value, host=settings.host, port=4321)

    def test_logging_follows_debug_setting(self, settings) -> None:
        settings.debug = True

        with patch.object(server_main, "load_settings", return_value=settings), \
                patch.object(server_main, "configure_logging") as configure_logging, \
                patch.object(server_main, "create_app"), \
                patch.object(server_main.uvicorn, "run"):
            server_main.main()

        configure_logging.assert_called_once_with(True)

    def test_importing_main_builds_no_app(self) -> None:
        import formrelay.main

        assert not hasattr(formrelay.main, "app")


class TestCheckMail:

    @pytest.mark.asyncio
    async def test_verifies_then_sends_test_email(self) -> None:
        dispatcher = MagicMock()
        dispatcher.verify = AsyncMock()
        dispatcher.deliver = AsyncMock()

        await check_mail.check(dispatcher)

        dispatcher.verify.assert_awaited_once()
        dispatcher.deliver.assert_awaited_once_with(
            subject=check_mail.TEST_SUBJECT, body=check_mail.TEST_BODY
        )

    @pytest.mark.asyncio
    async def test_failed_verification_sends_nothing(self) -> None:
        dispatcher = MagicMock()
        dispatcher.verify = AsyncMock(side_effect=OSError("connection refused"))
        dispatcher.deliver = AsyncMock()

        with pytest.raises(OSError):
            await check_mail.check(dispatcher)

        dispatcher.deliver.assert_not_called()

    def test_main_exit_status(self, settings) -> None:
        with patch.object(check_mail, "load_settings", return_value=settings), \
                patch.object(check_mail, "check", new=AsyncMock(side_effect=DeliveryError("535"))):
            assert check_mail.main() == 1

        with patch.object(check_mail, "load_settings", return_value=settings), \
                patch.object(check_mail, "check", new=AsyncMock()):
            assert check_mail.main() == 0
