"""
Key normalization helpers.

Two directions, exact inverses for keys made of ASCII letters, digits,
underscores and spaces:

- normalize_accessor: outbound, for method-style names ("New York" -> "new_york")
- normalize_key: inbound, for matching stored key values ("new_york" -> "new york")
"""


def normalize_accessor(value):
    """Lower-case a key and turn spaces into underscores."""
    return str(value).lower().replace(' ', '_')


def normalize_key(value):
    """Lower-case a key and turn underscores into spaces."""
    return str(value).lower().replace('_', ' ')
