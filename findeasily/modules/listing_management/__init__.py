# 📄 File: findeasily/modules/listing_management/__init__.py
# 🧭 Purpose (Layman Explanation):
# Organizes everything about property listings: creating a listing, adding photos, and
# looking at or editing your own listings
# 🧪 Purpose (Technical Summary):
# Package initialization for the listing management module (domain, application, infrastructure,
# presentation layers)
# 🔗 Dependencies:
# FastAPI, SQLAlchemy, pydantic, Pillow (through the shared FileService)
# 🔄 Connected Modules / Calls From:
# findeasily.main, findeasily.api.v1.router

"""
Listing Management Module

- Listing creation from the basic info form
- Listing photo upload
- Owner listing overview and single listing edit page

Only the owner of a listing, or an admin, may view its edit pages or add photos.
"""

__version__ = "1.0.0"
