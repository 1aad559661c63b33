"""
Test suite for the policy adapter factory.

This package contains tests covering:
- Connection config loading and placeholder expansion
- Request resolution against the local connection config
- Driver dispatch and the supported-driver whitelist
- The bundled file and SQLAlchemy adapter builders
- CLI operations and the end-to-end entry point
"""
