"""
Lifecycle Hooks Infrastructure Layer

Adapters implementing the domain ports.
"""
