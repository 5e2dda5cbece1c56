import logging

from django.apps import AppConfig
from django.conf import settings

logger = logging.getLogger(__name__)

_BLOB_STORE_REQUIRED = ("ENDPOINT", "ACCESS_KEY_ID", "SECRET_ACCESS_KEY")


def check_blob_store_config(blob_store: dict) -> list[str]:
    """Names of the missing blob-store settings. Only logged; nothing here needs the store."""
    missing = [f"R2_{key}" for key in _BLOB_STORE_REQUIRED if not blob_store.get(key)]
    if missing:
        logger.error("Blob store not configured: %s not set", ", ".join(missing))
    else:
        logger.info("Blob store configured at %s (region %s)", blob_store["ENDPOINT"], blob_store.get("REGION"))
    return missing


class LibraryConfig(AppConfig):
    default_auto_field = "django.db.models.BigAutoField"
    name = "library"

    def ready(self):
        logger.info("Initializing music library")
        check_blob_store_config(getattr(settings, "BLOB_STORE", {}))
