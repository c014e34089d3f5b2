"""
Social trading bounded context — domain layer.

Owns trading posts, the follow graph, trade ideas and shared
portfolios, and the rankings derived from them.
"""
