"""
Test fixtures and helper functions for lookup table tests.
"""
from django.contrib.auth import get_user_model
from lookup_tables.addresses.models import Address, Country, MessageStatus, State

User = get_user_model()


def get_or_create_test_user(username='lookup_tester'):
    """Get or create a test user for API tests"""
    user, created = User.objects.get_or_create(username=username)
    if created:
        user.set_password('testpass123')
        user.save()
    return user


def create_state(name='ut', description='Utah', enabled=True, sort_order=0):
    """Create a State lookup row"""
    return State.objects.create(
        name=name,
        description=description,
        enabled=enabled,
        sort_order=sort_order
    )


def create_states():
    """Create a handful of states, one of them disabled"""
    return {
        'ut': create_state('ut', 'Utah', sort_order=2),
        'ga': create_state('ga', 'Georgia', sort_order=1),
        'new york': create_state('new york', 'New York', sort_order=3),
        'zz': create_state('zz', 'Retired code', enabled=False, sort_order=0),
    }


def create_message_status(name='pending', description='Waiting to be sent'):
    """Create a MessageStatus lookup row"""
    return MessageStatus.objects.create(name=name, description=description)


def create_country(code='us', name='United States'):
    """Create a Country lookup row (keyed by code)"""
    return Country.objects.create(code=code, name=name)


def create_address(street='1 Main St', zip='84101', **kwargs):
    """Create an Address; lookup fields may be given as rows or keys"""
    return Address.objects.create(street=street, zip=zip, **kwargs)
