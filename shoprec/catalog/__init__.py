"""
Catalog index.

Responsibilities:
- Derive category -> products and product -> popularity from the full
  ratings table, once, at startup.
- Hold the loaded dataset and derived indexes as one read-only snapshot
  shared by every request.
"""
