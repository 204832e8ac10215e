"""
Tests for the LOOKUP_TABLES settings object.
"""
from django.test import SimpleTestCase, override_settings

from lookup_tables.lookups.conf import DEFAULTS, LookupSettings, lookup_settings


class LookupSettingsTests(SimpleTestCase):
    """Test lookup_settings"""

    def test_defaults(self):
        """Test values when the project does not override them"""
        settings = LookupSettings(DEFAULTS)
        with override_settings(LOOKUP_TABLES={}):
            self.assertEqual(settings.DEFAULT_KEY_COLUMN, 'name')
            self.assertTrue(settings.IMPLICIT_CREATE)
            self.assertTrue(settings.RETRY_READ_ON_CREATE_FAILURE)
            self.assertTrue(settings.LIST_ONLY_ENABLED)

    def test_override_is_picked_up(self):
        """Test that changing settings reloads cached values"""
        self.assertTrue(lookup_settings.IMPLICIT_CREATE)
        with override_settings(LOOKUP_TABLES={'IMPLICIT_CREATE': False}):
            self.assertFalse(lookup_settings.IMPLICIT_CREATE)
            self.assertTrue(lookup_settings.RETRY_READ_ON_CREATE_FAILURE)
        self.assertTrue(lookup_settings.IMPLICIT_CREATE)

    def test_unknown_setting_raises(self):
        """Test a typo in a setting name"""
        with self.assertRaises(AttributeError):
            lookup_settings.IMPLICT_CREATE
