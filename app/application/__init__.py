"""
Application layer package.

Use cases for the identity, social and markets contexts. Each use case
is a single class with one public `execute` method that takes a frozen
DTO and returns one. Depends on domain services and ports, never on
infrastructure.
"""
