"""
Card Gateway - HTTP to relational database gateway for cards

A FastAPI-based microservice that exposes create, read, update and
delete operations over a single configurable card table.
"""

__version__ = "0.1.0"
