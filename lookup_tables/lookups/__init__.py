"""
Lookup Tables App

Resolution, implicit creation and HTTP/form helpers for lookup tables.
"""

# Don't import models, fields or services here - causes circular import during Django initialization
# Import them where needed instead: from lookup_tables.lookups.fields import LookupForeignKey
