"""Registry — the durable item store and its operations.

The registry provides:
- Storage: a mapping from 128-bit identifiers to items, persisted by a store
- Insert-only creation: an occupied identifier is never overwritten
- Deletion: removing an absent identifier is an error
- Owner-gated reset: only the service owner may clear every item
"""
