"""Domain layer - core business logic and interfaces.

This layer contains:
- Domain entities
- Store and provider interfaces
- Domain exceptions
"""
