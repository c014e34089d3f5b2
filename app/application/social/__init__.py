"""
Application layer for the social trading bounded context.

Use cases validate caller input, enforce permissions and delegate
to the SocialGraphStore.
"""
