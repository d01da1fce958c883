from django.apps import AppConfig


class BugtrackerConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "apps.bugtracker"   # full dotted path (app lives under apps/)
    label = "bugtracker"
    verbose_name = "Bug reports"
