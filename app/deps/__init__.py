from dishka import AsyncContainer, Provider, Scope, make_async_container
from pydantic_settings import BaseSettings

from app.services.bfhl import BfhlServicesProvider
from app.settings.app import AppSettings
from app.settings.identity import IdentitySettings


class AppProvider(Provider):
    def register_settings(self, settings: type[BaseSettings]):
        self.provide(lambda: settings(), scope=Scope.APP, provides=settings)


def create_container() -> AsyncContainer:
    provider = AppProvider()
    provider.register_settings(AppSettings)
    provider.register_settings(IdentitySettings)

    container = make_async_container(
        provider,
        BfhlServicesProvider(),
    )
    return container
