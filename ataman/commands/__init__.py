"""CLI command modules for ataman."""
