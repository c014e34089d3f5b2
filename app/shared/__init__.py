"""
Shared module package.

Cross-cutting concerns used by every bounded context: domain error to
HTTP mapping, secure headers, credential-aware rate limiting and
logging configuration with credential redaction.
"""
