"""Utility modules for Ataman.

- logging: logging setup for the CLI
- output: shared rich consoles and JSON output
"""
