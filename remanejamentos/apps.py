from django.apps import AppConfig


class RemanejamentosConfig(AppConfig):
    default_auto_field = 'django.db.models.BigAutoField'
    name = 'remanejamentos'
    verbose_name = 'Remanejamentos'
