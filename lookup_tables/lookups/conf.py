"""
Settings for the lookup tables app.

All options live in a single ``LOOKUP_TABLES`` dict in the Django settings:

    LOOKUP_TABLES = {
        'DEFAULT_KEY_COLUMN': 'name',
        'IMPLICIT_CREATE': True,
        'RETRY_READ_ON_CREATE_FAILURE': True,
        'LIST_ONLY_ENABLED': True,
    }

Access them through ``lookup_settings``:

    from lookup_tables.lookups.conf import lookup_settings
    lookup_settings.IMPLICIT_CREATE
"""
from django.conf import settings
from django.core.signals import setting_changed

DEFAULTS = {
    # Column used as the human key when a lookup model does not set key_column
    'DEFAULT_KEY_COLUMN': 'name',
    # Create missing lookup rows when a referrer is assigned an unknown key
    'IMPLICIT_CREATE': True,
    # Re-read the key once when the implicit insert fails (e.g. lost a race)
    'RETRY_READ_ON_CREATE_FAILURE': True,
    # Hide disabled rows from select boxes and list endpoints
    'LIST_ONLY_ENABLED': True,
}


class LookupSettings:
    """
    Lazy settings object. Values are read from ``settings.LOOKUP_TABLES``
    on first access, falling back to DEFAULTS, and cached until reload().
    """

    def __init__(self, defaults=None):
        self.defaults = defaults or DEFAULTS
        self._cached_attrs = set()

    @property
    def user_settings(self):
        if not hasattr(self, '_user_settings'):
            self._user_settings = getattr(settings, 'LOOKUP_TABLES', {})
        return self._user_settings

    def __getattr__(self, attr):
        if attr not in self.defaults:
            raise AttributeError(f"Invalid lookup tables setting: '{attr}'")

        try:
            val = self.user_settings[attr]
        except KeyError:
            val = self.defaults[attr]

        self._cached_attrs.add(attr)
        setattr(self, attr, val)
        return val

    def reload(self):
        for attr in self._cached_attrs:
            delattr(self, attr)
        self._cached_attrs.clear()
        if hasattr(self, '_user_settings'):
            delattr(self, '_user_settings')


lookup_settings = LookupSettings(DEFAULTS)


def reload_lookup_settings(*args, **kwargs):
    if kwargs['setting'] == 'LOOKUP_TABLES':
        lookup_settings.reload()


setting_changed.connect(reload_lookup_settings)
