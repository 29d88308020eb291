from django.conf import settings

DEFAULTS = {
    # Set to False to let all deletes through, e.g. during data migrations
    "ENABLED": True,
    "LOGGER": "preventdeletion",
    "MESSAGE": "Cannot delete this record because it has related records: {relations}.",
}


def get_setting(name):
    """Returns a value from the PREVENT_DELETION settings dict, falling back to the default."""
    if name not in DEFAULTS:
        raise KeyError("Unknown PREVENT_DELETION setting: {}".format(name))
    return getattr(settings, "PREVENT_DELETION", {}).get(name, DEFAULTS[name])
