"""HTTP API for Matchlog.

- Validates inputs, calls the active MatchStore
- Maps domain errors to JSON responses in one place
- Forbidden: choosing or branching on the storage backend
"""
