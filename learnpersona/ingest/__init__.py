"""
Ingest Module

Database schema, connection management and demo data seeding.
"""
