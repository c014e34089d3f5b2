"""
Identity bounded context — domain layer.

Resolves wallets to N1NJ4 identity tiers and turns them into
signed credentials:
- Tier catalog and permission lattice
- Identity resolution against the holder registry
- Credential issuance and verification
- Tier-personalized feeds
"""
