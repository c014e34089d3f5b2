"""
Infrastructure adapters for the markets bounded context.

Connects to the Injective LCD REST API for market data and
account balances.
"""
