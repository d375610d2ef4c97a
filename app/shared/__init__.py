"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error taxonomy and error-to-HTTP mapping
- Validation error translation and pagination helpers
- Request correlation and access logging middleware
- Security headers and rate limiting
- Logging configuration
"""
