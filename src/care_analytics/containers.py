"""Dependency container wiring for the application."""

from dataclasses import dataclass

from care_analytics.adapters.memory_repository import InMemoryCareRecordRepository
from care_analytics.app_logging import configure_logging
from care_analytics.config import Settings
from care_analytics.services.analytics import CareAnalyticsService, CareRecordRepository


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    repository: CareRecordRepository
    analytics_service: CareAnalyticsService


def build_container(
    settings: Settings | None = None,
    repository: CareRecordRepository | None = None,
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    configure_logging(debug=resolved_settings.debug)
    resolved_repository = repository or InMemoryCareRecordRepository()
    analytics_service = CareAnalyticsService(
        repository=resolved_repository,
        timezone_name=resolved_settings.timezone,
        debug=resolved_settings.debug,
        default_window=resolved_settings.default_window,
    )
    return AppContainer(
        settings=resolved_settings,
        repository=resolved_repository,
        analytics_service=analytics_service,
    )
