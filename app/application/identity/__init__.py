"""
Application layer for the identity bounded context.

Use cases coordinate identity resolution, credential issuance and
feed composition. No framework or infrastructure imports allowed.
"""
