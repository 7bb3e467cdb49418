"""GCD Calculator Package — HTML form service over a Euclidean GCD core.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
