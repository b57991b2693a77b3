"""
Access Package - role-gated route authorization.

- roles: closed set of roles
- gate: the pure allow/redirect decision
- session: per-request session state
- routes: dashboard route registry and sidebar navigation
- permissions: DRF permission running the decision for API views
"""
