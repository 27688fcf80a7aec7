# Services package init
"""
HeartMap Backend — Services Layer
==================================

Service Inventory:
    - Geocoder (abstract): coordinates → country, never raises
    - NominatimGeocoder: Geocoder backed by OpenStreetMap Nominatim
    - HeartStore (abstract) / SqlHeartStore: marker persistence
    - HeartService: validate → enrich → persist, and listing
"""
