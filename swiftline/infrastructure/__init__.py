# swiftline/infrastructure/__init__.py

"""Infrastructure layer: configuration, logging, progress display and HTTP transport"""
