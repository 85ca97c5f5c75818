"""Onion Scaffold Package: pure core wrapped by services, infrastructure and api.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
    - Dependency arrows point inward: api -> services -> core, api -> infrastructure -> core
"""
