from django.apps import AppConfig


class EventRegConfig(AppConfig):
    name = "eventreg"
    verbose_name = "Event registration"
