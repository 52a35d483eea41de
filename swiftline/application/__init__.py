# swiftline/application/__init__.py

"""Application layer: processing steps and the services that orchestrate them"""
