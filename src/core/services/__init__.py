"""
Business services for Budget Backpack.

- users.py: registration and credential checks
- trips.py: trip CRUD and saved items
- search.py: provider call + normalization per search domain
"""

__all__: list[str] = []
