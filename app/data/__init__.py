"""
Data access layer.

Design rules:
- Views call ONLY functions in this package.
- Provider choice (Supabase vs fixture) is made once, in service.select_providers.
- No env var reads here (config-only).
"""
