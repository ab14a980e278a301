"""
Infrastructure layer for listing management (SQLAlchemy persistence).
"""
