"""Core - configuration, enums, escaping and exceptions."""
