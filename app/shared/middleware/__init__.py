"""
HTTP middleware shared by every bounded context.
"""
