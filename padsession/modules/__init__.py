"""
padsession modules following Black Box Design principles.

Each module exposes a narrow interface and hides its implementation:
- config: environment configuration
- storage: Redis connection and JSON key/value store
- author: author existence checks
- session: session lifecycle and author index
"""
