from dependency_injector import containers, providers

from mock_engine.core.config import settings
from mock_engine.services.mock_engine import MockEngine


class Container(containers.DeclarativeContainer):
    """Dependency injection container"""

    app_settings = providers.Object(settings)

    # A fresh engine per call; callers pass type_name / behavior / result_types
    mock_engine = providers.Factory(
        MockEngine,
        settings=app_settings,
    )
