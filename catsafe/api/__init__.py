"""
HTTP API for the Cat Safe system.
"""
