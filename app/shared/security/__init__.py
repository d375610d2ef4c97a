"""
HTTP hardening: security headers and rate limiting.
"""
