class SchemaError(ValueError):
    """Raised when a descriptor tree cannot be rendered.

    The only such tree is one where a union sits in a position that needs a
    single type string, i.e. directly inside another union.
    """
