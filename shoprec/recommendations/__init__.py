"""
Recommendation engine.

Responsibilities:
- Resolve the categories a user buys from most (all ties included).
- Collect unowned products from those categories, ranked by popularity.
- Assemble the per-user response: purchases plus recommendations.
"""
