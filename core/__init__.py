"""Core functionality for Hue light control.

This package contains:
- client: Bridge and BridgeClient for API interaction
- config: Credential storage for the CLI
- errors: Exception hierarchy
"""
