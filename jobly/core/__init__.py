"""
Core application infrastructure: configuration, database, security, exceptions.
"""
