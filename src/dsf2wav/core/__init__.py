"""Core types, configuration table and exceptions."""
