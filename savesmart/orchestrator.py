"""
Component Wiring for the Onboarding Form

Builds the form controller with its draft storage and audit logger from
settings. The UI only calls create_app_components().
"""

from typing import Optional

from savesmart.audit import FormAuditLogger, configure_logging, get_logger
from savesmart.config import get_settings
from savesmart.forms import FormController
from savesmart.storage import FormStorageInterface, InMemoryFormStorage, JsonFileFormStorage


def create_storage(use_storage: bool = True) -> FormStorageInterface:
    """
    Create draft storage.

    Args:
        use_storage: Whether to persist drafts to disk. When False (or when
                     the configured directory is unusable) drafts live in
                     memory for this session only.
    """
    settings = get_settings().onboarding
    if not use_storage:
        return InMemoryFormStorage()

    storage = JsonFileFormStorage(settings.storage_dir, key_prefix=settings.storage_key_prefix)
    if not storage.is_available():
        get_logger("savesmart").warning(
            "storage_fallback_to_memory", directory=str(settings.storage_dir)
        )
        return InMemoryFormStorage()
    return storage


def create_app_components(
    use_storage: bool = True,
) -> tuple[FormController, FormStorageInterface, FormAuditLogger]:
    """
    Factory function to create all application components.

    Returns:
        (form_controller, storage, audit_logger)
    """
    configure_logging(get_settings().app.log_level)

    storage = create_storage(use_storage)
    audit_logger = FormAuditLogger()
    controller = FormController(storage=storage, audit_logger=audit_logger)

    return controller, storage, audit_logger


def default_show_validation(override: Optional[bool] = None) -> bool:
    """Whether inputs should surface validation messages."""
    if override is not None:
        return override
    return get_settings().onboarding.show_validation
