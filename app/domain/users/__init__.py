"""
Users bounded context — domain layer.

Entities and the repository port for managed user accounts.
"""
