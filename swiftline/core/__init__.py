# swiftline/core/__init__.py

"""Core types and domain models"""
