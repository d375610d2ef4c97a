"""
Application layer package.

Contains the services that enforce business rules over domain ports:
identity and timestamp assignment, uniqueness and existence checks.
This layer depends on domain ports, never on infrastructure.
"""
