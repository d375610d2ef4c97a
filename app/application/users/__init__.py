"""
Users bounded context — application layer.
"""
