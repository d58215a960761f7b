"""
Data access layer.

Design rules:
- Views call ONLY functions in data.service (plus the record types).
- All store reads are wrapped to allow graceful fallback to the sample dataset.
- The store handle is passed in explicitly; no env var reads here (config-only).
"""
