import logging

from django.apps import AppConfig, apps
from django.conf import settings
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class CoreConfig(AppConfig):
    """
    Project-wide wiring.

    Builds the storage backend named by ``LEADS_STORAGE_BACKEND`` once at
    startup; API views receive it through ``get_storage()``.
    """

    default_auto_field = 'django.db.models.BigAutoField'
    name = 'core'
    verbose_name = 'Core'

    storage = None

    def ready(self):
        backend_path = getattr(settings, 'LEADS_STORAGE_BACKEND', 'core.storage.DatabaseStorage')
        self.storage = import_string(backend_path)()
        logger.info(f"Storage backend initialised: {backend_path}")


def get_storage():
    """Return the storage instance constructed at startup."""
    return apps.get_app_config('core').storage
