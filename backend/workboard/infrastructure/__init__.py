"""
Infrastructure Layer

Concrete implementations of the storage port defined in the domain.

Components:
- persistence/: Key-value backends (memory, JSON file, SQL)
"""
