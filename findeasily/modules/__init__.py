"""
Feature modules of FindEasily: user management and listing management.
"""
