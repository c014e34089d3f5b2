"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer: the holder registry, credential
signing, the Injective LCD client and the market cache.
"""
