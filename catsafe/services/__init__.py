"""
Domain services for the Cat Safe system.
"""
