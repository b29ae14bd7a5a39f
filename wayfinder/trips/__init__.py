"""
Per-user trip storage.

Responsibilities:
- Keep each user's saved trips, keyed by trip id.
- Serialise every read-modify-write on one user's trips.
- Decide whether a save creates a trip or replaces an existing one.
- Attach a generated cover image to new trips.
"""
