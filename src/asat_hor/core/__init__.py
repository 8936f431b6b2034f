"""Core value types and exceptions."""
