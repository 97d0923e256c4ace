from soundcloud_downloader.app import App, create_app
from soundcloud_downloader.config.settings import Environment, LogLevel, Settings
from soundcloud_downloader.infrastructure.logging import get_logger, is_configured


def test_create_app_uses_default_settings():
    app = create_app()
    assert isinstance(app, App)
    assert isinstance(app.settings, Settings)
    assert app.settings.environment == Environment.DEVELOPMENT
    assert app.settings.log_level == LogLevel.INFO


def test_create_app_with_custom_settings(test_settings):
    """Test create_app with custom settings using fixture."""
    app = create_app(settings=test_settings)
    assert app.settings is test_settings
    assert app.settings.environment == Environment.TESTING
    assert app.settings.log_level == LogLevel.CRITICAL


def test_create_app_configures_logging():
    """create_app configures logging (autouse fixture provides clean state)."""
    assert is_configured() is False
    _ = create_app()
    assert is_configured() is True


def test_logger_configured_with_test_app(test_app):
    """Logger is usable once the test app has been created."""
    assert test_app is not None
    assert is_configured() is True

    logger = get_logger(__name__)
    logger.critical("Test critical message - should appear")
    logger.info("Test info message - should be filtered out")
