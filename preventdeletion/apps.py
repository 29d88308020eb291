from django.apps import AppConfig


class PreventDeletionConfig(AppConfig):
    name = "preventdeletion"
    verbose_name = "Prevent deletion"

    def ready(self):
        from preventdeletion.receivers import connect_receivers

        # All models are loaded at this point, including those of later apps
        connect_receivers(self.apps)
