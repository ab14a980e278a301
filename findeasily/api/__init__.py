# 📄 File: findeasily/api/__init__.py
# 🧭 Purpose (Layman Explanation):
# Marks the folder with the site's web-facing plumbing: the address book of routes and the
# helpers that wrap every request.
# 🧪 Purpose (Technical Summary):
# API layer package: v1 router aggregation and middleware.

"""
FindEasily API Package

Structure:
    api/
    ├── middleware/          # request logging, exception handlers
    └── v1/
        ├── router.py        # aggregated module routers
        └── health.py        # health endpoints
"""
