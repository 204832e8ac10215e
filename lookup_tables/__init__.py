"""
Lookup Tables for Django

Lets small reference tables (states, statuses, countries) be addressed by a
human-readable key instead of their numeric primary key.

    State.objects.resolve_attribute('UT', 'id')
    Address.objects.find_by_state('ut')
    address.state = 'GA'    # creates the "ga" state row when missing
"""

__version__ = '1.0.0'
