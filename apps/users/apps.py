from django.apps import AppConfig  # type: ignore


class UsersConfig(AppConfig):
    name = "apps.users"
    label = "users"
    verbose_name = "Users"

    def ready(self) -> None:
        from . import schema  # noqa: F401
