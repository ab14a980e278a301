"""
Application layer for listing management: forms, validators, DTOs and the
listing request handler.
"""
