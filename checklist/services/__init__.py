"""Services Layer — orchestration of store, cache and audit collaborators.

Invariants:
    - Services depend on core Protocols, never on concrete adapters
    - Collaborators are injected at construction time (no module-level clients)

Design Decisions:
    - One file per concern: orchestrator, best-effort helper, audit fan-out
"""
