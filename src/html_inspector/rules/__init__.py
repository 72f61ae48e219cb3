"""
Built-in inspection rules.

Every module in this package exposes a `DEFINITION` (a RuleDefinition) and
is registered automatically by `RuleRegistry.discover()`.
"""
