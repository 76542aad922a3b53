"""
Core infrastructure: settings, logging, the MongoDB connection manager
and the error types shared by services and endpoints.
"""
