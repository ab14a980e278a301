"""Listing management API routers."""
