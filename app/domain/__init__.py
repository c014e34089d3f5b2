"""
Domain layer package.

Contains business logic: entities, value objects, domain services,
and port interfaces. No framework imports and no network IO.
"""
