"""
Service layer.

Services hold the database logic behind the API endpoints.  They work
on an injected collection handle so that endpoints stay thin and the
storage can be replaced in tests.
"""
