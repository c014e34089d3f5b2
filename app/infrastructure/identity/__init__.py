"""
Infrastructure adapters for the identity bounded context.

Each adapter implements a domain port (ABC): the holder registry
and the credential signer.
"""
