"""
Purchase recommendation service.

A read-only snapshot of user ratings and product categories is built once at
startup; each query resolves the user's preferred categories and returns the
most popular products from them that the user does not already own.
"""
