# swiftline/shared/__init__.py

"""Shared helpers used by both features"""
