"""
Lookup Table Exceptions
"""


class UnsupportedAccessor(AttributeError):
    """
    Raised when a caller asks a lookup table for an attribute that is not one
    of its columns, or a referrer for a find-by name that is not one of its
    lookup relationships.

    Subclasses AttributeError so it reads like any other missing attribute to
    introspection and tooling. A missing row is never an exception: resolvers
    return None for that.
    """

    def __init__(self, model, accessor):
        self.model = model
        self.accessor = accessor
        super().__init__(f"{model.__name__} has no lookup accessor '{accessor}'")
