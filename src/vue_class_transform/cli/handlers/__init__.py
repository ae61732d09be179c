"""
Command handler implementations for the CLI.
"""
