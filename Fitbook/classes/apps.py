from django.apps import AppConfig


class ClassesConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'classes'
    verbose_name = 'Fitness classes'

    def ready(self):
        from classes.event_handlers import register_handlers
        register_handlers()
