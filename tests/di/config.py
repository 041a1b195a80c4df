"""Fixed settings provider for testing."""

from dishka import Provider, Scope, provide

from comet.config import Settings


class FixedSettingsProvider(Provider):
    """Serves a prepared Settings instance instead of reading the environment.

    Registered after the production config provider so it takes precedence.
    """

    def __init__(self, settings: Settings) -> None:
        super().__init__()
        self._settings = settings

    @provide(scope=Scope.APP)
    def provide_settings(self) -> Settings:
        return self._settings
