"""
Markets bounded context — domain layer.

Ports onto the external market-data collaborator.
"""
