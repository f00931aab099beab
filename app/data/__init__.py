"""
Data access layer.

Design rules:
- The API handlers and the UI call ONLY functions in this package.
- All record store calls are wrapped to allow graceful fallback to mock data.
- No env var reads here (config-only).
"""
