# swiftline/adapters/__init__.py

"""Adapters that expose swiftline to the outside world"""
