from django.apps import AppConfig, apps


class CoreConfig(AppConfig):
    name = "modules.core"
    label = "core"

    container = None

    def ready(self) -> None:
        from modules.core.container import build_container

        self.container = build_container()


def get_container():
    """The container serving HTTP requests for this process."""
    return apps.get_app_config("core").container
