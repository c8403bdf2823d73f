"""
Core components shared by every layer: domain primitives, application
factory and lifecycle management.
"""
