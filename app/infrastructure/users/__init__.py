"""
Users bounded context — infrastructure adapters.
"""
