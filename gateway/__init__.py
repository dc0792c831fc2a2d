"""QuantumLink Gateway — read-only HTTP facade over the external service tables.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
