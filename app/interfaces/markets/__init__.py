"""Market data interface: summaries, liquidity and normalized data."""
