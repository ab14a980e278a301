"""
Listing Management Domain Layer

Domain Models: Listing, ListingPhoto
Domain Services: ListingService
Repository Interfaces: ListingRepository
"""
