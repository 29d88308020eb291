from django.db.models.signals import pre_delete

from preventdeletion.conf import get_setting
from preventdeletion.guard import DeletionGuard
from preventdeletion.models import PreventDeletionMixin


def prevent_deletion(sender, instance, **kwargs):
    """Aborts the deletion of a guarded instance by raising PreventDeletionError."""
    if not get_setting("ENABLED"):
        return
    DeletionGuard().enforce(instance)


def connect_receivers(apps):
    """Connects prevent_deletion to pre_delete for each model using PreventDeletionMixin.

    Models without the mixin get no listener, so Django can still fast-delete them.
    """
    for model in apps.get_models():
        if issubclass(model, PreventDeletionMixin):
            pre_delete.connect(
                prevent_deletion,
                sender=model,
                dispatch_uid="preventdeletion.prevent_deletion",
            )
