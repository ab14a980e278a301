"""
Presentation layer for listing management: routes under /mgmt.
"""
