"""
Tests for lookup table models: configuration, key resolution, equality and
the queryset helpers.
"""
import re

from django.core.exceptions import FieldDoesNotExist
from django.db import IntegrityError
from django.test import TestCase

from lookup_tables.addresses.models import Country, State
from lookup_tables.lookups.exceptions import UnsupportedAccessor
from lookup_tables.lookups.services import LookupService
from .fixtures import create_country, create_state, create_states


class LookupConfigurationTests(TestCase):
    """Test configure() and the recognized attributes"""

    def test_default_key_column_is_name(self):
        """Test that LookupModel subclasses key on name"""
        self.assertEqual(State.key_column, 'name')

    def test_custom_key_column(self):
        """Test that a model can key on another column"""
        self.assertEqual(Country.key_column, 'code')

    def test_recognized_attributes_include_columns_and_id(self):
        """Test the attribute set derived from the table schema"""
        self.assertEqual(
            State.recognized_attributes,
            frozenset({'id', 'name', 'description', 'enabled', 'sort_order'})
        )

    def test_configure_rejects_unknown_key_column(self):
        """Test that configuring a missing key column fails loudly"""
        with self.assertRaises(FieldDoesNotExist):
            State.configure('abbreviation')
        self.assertEqual(State.key_column, 'name')

    def test_key_column_is_unique_in_storage(self):
        """Test the uniqueness constraint on the key column"""
        create_state('ut')
        with self.assertRaises(IntegrityError):
            State.objects.create(name='ut')


class ResolveRecordTests(TestCase):
    """Test resolve_record() / resolve_entity()"""

    def setUp(self):
        self.states = create_states()

    def test_resolve_any_case(self):
        """Test that the key is matched case-insensitively"""
        utah = self.states['ut']
        for key in ['UT', 'ut', 'Ut', 'uT']:
            self.assertEqual(State.objects.resolve_record(key).pk, utah.pk)

    def test_resolve_spaces_and_underscores_interchangeably(self):
        """Test keys whose stored form contains spaces"""
        new_york = self.states['new york']
        for key in ['new york', 'New_York', 'NEW YORK', 'new_york']:
            self.assertEqual(State.objects.resolve_record(key).pk, new_york.pk)

    def test_missing_key_returns_none(self):
        """Test that a missing row is a None result, not an exception"""
        self.assertIsNone(State.objects.resolve_record('tx'))
        self.assertIsNone(State.objects.resolve_record(None))

    def test_resolve_entity_is_resolve_record(self):
        """Test the 'object' alias"""
        self.assertEqual(State.objects.resolve_entity('GA'), self.states['ga'])
        self.assertEqual(State.objects.resolve('GA'), self.states['ga'])
        self.assertEqual(State.objects.resolve_attribute('GA', 'object'), self.states['ga'])

    def test_resolve_respects_queryset_filters(self):
        """Test resolving against an already filtered queryset"""
        self.assertIsNotNone(State.objects.resolve_record('zz'))
        self.assertIsNone(State.objects.enabled().resolve_record('zz'))

    def test_resolve_with_custom_key_column(self):
        """Test a lookup keyed by code"""
        usa = create_country('us', 'United States')
        self.assertEqual(Country.objects.resolve_record('US'), usa)
        self.assertIsNone(Country.objects.resolve_record('United States'))


class ResolveAttributeTests(TestCase):
    """Test resolve_attribute()"""

    def setUp(self):
        self.utah = create_state('ut', 'Utah')

    def test_description_and_id(self):
        """Test reading single columns by human key"""
        self.assertEqual(State.objects.resolve_attribute('UT', 'description'), 'Utah')
        self.assertEqual(State.objects.resolve_attribute('UT', 'id'), self.utah.pk)

    def test_attribute_name_is_normalized(self):
        """Test attribute names given with spaces or capitals"""
        self.assertEqual(State.objects.resolve_attribute('ut', 'Sort Order'), 0)
        self.assertEqual(State.objects.resolve_attribute('ut', 'ENABLED'), True)

    def test_missing_key_returns_none(self):
        """Test that unknown keys resolve to None for any recognized attribute"""
        self.assertIsNone(State.objects.resolve_attribute('tx', 'id'))
        self.assertIsNone(State.objects.resolve_attribute('tx', 'description'))

    def test_unknown_attribute_raises_unsupported_accessor(self):
        """Test that a typo is distinguishable from missing data"""
        for key in ['ut', 'tx']:
            with self.assertRaises(UnsupportedAccessor) as ctx:
                State.objects.resolve_attribute(key, 'bogus_field')
            self.assertEqual(ctx.exception.accessor, 'bogus_field')
            self.assertIs(ctx.exception.model, State)

    def test_unsupported_accessor_is_attribute_error(self):
        """Test that tooling sees the normal missing-attribute failure"""
        with self.assertRaises(AttributeError):
            State.objects.resolve_attribute('ut', 'abbreviation')

    def test_service_resolves_through_plain_querysets(self):
        """Test LookupService on models and querysets"""
        self.assertEqual(LookupService.resolve_attribute(State, 'UT', 'description'), 'Utah')
        self.assertEqual(LookupService.resolve_record(State.objects.all(), 'ut'), self.utah)
        self.assertEqual(LookupService.resolve_entity(State, 'ut'), self.utah)


class LookupRowBehaviorTests(TestCase):
    """Test equality, display and matching of lookup rows"""

    def setUp(self):
        self.utah = create_state('ut', 'Utah')

    def test_str_is_key(self):
        """Test that a row displays as its key"""
        self.assertEqual(str(self.utah), 'ut')
        self.assertEqual(str(create_country('ca', 'Canada')), 'ca')

    def test_equals_key_strings_case_insensitive(self):
        """Test comparing rows with keys"""
        self.assertEqual(self.utah, 'UT')
        self.assertEqual(self.utah, 'ut')
        self.assertTrue(self.utah == 'Ut')
        self.assertNotEqual(self.utah, 'ga')

    def test_equals_same_row(self):
        """Test comparing rows of the same table"""
        self.assertEqual(self.utah, State.objects.get(pk=self.utah.pk))
        self.assertNotEqual(self.utah, create_state('ga'))

    def test_not_equal_to_other_lookup_type_with_same_id(self):
        """Test that ids are only comparable within one table"""
        country = Country.objects.create(id=self.utah.pk, code='ut', name='Utopia')
        self.assertEqual(country.pk, self.utah.pk)
        self.assertNotEqual(self.utah, country)

    def test_rows_stay_hashable(self):
        """Test using rows in sets"""
        same = State.objects.get(pk=self.utah.pk)
        self.assertEqual(len({self.utah, same}), 1)

    def test_matches_substring_case_insensitive(self):
        """Test matching with plain strings"""
        new_york = create_state('new york', 'New York')
        self.assertTrue(new_york.matches('YORK'))
        self.assertTrue(new_york.matches('new'))
        self.assertFalse(new_york.matches('jersey'))

    def test_matches_regex(self):
        """Test matching with compiled patterns"""
        self.assertTrue(self.utah.matches(re.compile(r'^u')))
        self.assertFalse(self.utah.matches(re.compile(r'^U')))
        self.assertTrue(self.utah.matches(re.compile(r'^U', re.IGNORECASE)))

    def test_matches_other_types_is_false(self):
        """Test matching with unsupported pattern types"""
        self.assertFalse(self.utah.matches(42))
        self.assertFalse(self.utah.matches(None))


class LookupQuerySetTests(TestCase):
    """Test the listing helpers"""

    def setUp(self):
        self.states = create_states()

    def test_enabled(self):
        """Test that disabled rows are excluded"""
        names = set(State.objects.enabled().values_list('name', flat=True))
        self.assertEqual(names, {'ut', 'ga', 'new york'})

    def test_ordered(self):
        """Test ordering by sort_order then key"""
        names = list(State.objects.enabled().ordered().values_list('name', flat=True))
        self.assertEqual(names, ['ga', 'ut', 'new york'])

    def test_ordered_without_sort_order_column(self):
        """Test ordering a lookup without sort_order"""
        create_country('us')
        create_country('ca')
        codes = list(Country.objects.ordered().values_list('code', flat=True))
        self.assertEqual(codes, ['ca', 'us'])

    def test_matching(self):
        """Test contains match on the key column"""
        names = set(State.objects.matching('Y').values_list('name', flat=True))
        self.assertEqual(names, {'new york'})

    def test_filter_by_search_params(self):
        """Test the standard list filters"""
        by_name = State.objects.filter_by_search_params({'name': 'New_York'})
        self.assertEqual(list(by_name), [self.states['new york']])

        by_description = State.objects.filter_by_search_params({'search': 'georg'})
        self.assertEqual(list(by_description), [self.states['ga']])

        disabled = State.objects.filter_by_search_params({'enabled': 'false'})
        self.assertEqual(list(disabled), [self.states['zz']])
