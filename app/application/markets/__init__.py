"""
Application layer for the markets bounded context.
"""
