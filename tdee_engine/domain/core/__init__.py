"""Core domain types: value objects, ports and exceptions."""
