"""
Point-of-interest selection engine.

Responsibilities:
- Resolve a free-text destination to coordinates (Nominatim).
- Fetch tagged OpenStreetMap features around it (Overpass).
- Categorise and score each feature against the user's mood.
- Return a per-category, quota-bounded ranked shortlist.
"""
