"""
Test Suite

Unit tests for the SQL builders, database-backed repository tests and
HTTP tests for the Jobly API.
"""
