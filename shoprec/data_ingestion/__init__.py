"""
Dataset loading for the purchase recommendation service.

Responsibilities:
- Read the ratings table (user -> product -> rating) from JSON or CSV.
- Read the product -> category mapping from JSON or CSV.
- Validate both shapes and fail loudly, since the server must not start
  on partial data.
"""
