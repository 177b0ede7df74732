"""
Command Line Interface Package

Unified CLI for the budgeting search tools.

Command Structure:
- budgeting: Main entry point with utility commands (version, config)
- budgeting search parse: Show how a search string is interpreted
- budgeting search filter: Filter an exported ledger CSV with a search string
"""
