"""
Shared error handling package.

Translates gateway domain errors into JSON error responses with
stable status codes.
"""
