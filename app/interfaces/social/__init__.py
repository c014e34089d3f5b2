"""Social trading interface: posts, follows, trade ideas and portfolios."""
