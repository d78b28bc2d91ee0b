"""Infrastructure Layer — adapters for the store, cache, audit stream and logging.

Invariants:
    - Infrastructure implements core Protocols; core never imports from here
    - Adapter failures are mapped to typed errors (StoreError, CacheError)

Design Decisions:
    - Thin adapters: no orchestration logic, no retries (ADR: single responsibility)
"""
