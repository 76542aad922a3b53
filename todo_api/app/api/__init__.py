"""
API package containing the HTTP routes.

``router`` in ``router.py`` bundles the endpoint modules found in
``endpoints``.
"""
