"""CLI command modules.

This package contains:
- setup: Registration and credential commands (register, configure)
- inspection: Read commands (lights, state)
- control: Direct control commands (set, power, brightness)
- helpers: Shared client construction and output helpers
"""
