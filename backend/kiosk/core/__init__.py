"""
Core - configuration, database access, errors and time helpers
"""
