# 📄 File: findeasily/api/v1/router.py
# 🧭 Purpose (Layman Explanation):
# The site's address book: collects the web addresses of every part of the site in one place.
# 🧪 Purpose (Technical Summary):
# Aggregates the module routers (public account, signed-in account, listing management) and
# the health endpoints into one APIRouter mounted by the application factory.
# 🔗 Dependencies:
# FastAPI APIRouter, module presentation routers
# 🔄 Connected Modules / Calls From:
# findeasily.main (create_application)

from fastapi import APIRouter

from findeasily.modules.listing_management.presentation.api.v1 import listings_router
from findeasily.modules.user_management.presentation.api.v1 import public_router, users_router

from .health import health_router

api_router = APIRouter()

api_router.include_router(health_router)
api_router.include_router(public_router)
api_router.include_router(users_router)
api_router.include_router(listings_router)
