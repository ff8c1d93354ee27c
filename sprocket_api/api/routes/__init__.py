"""
API route modules.

This package contains subrouters for:
- Teams: team CRUD and team rosters
- Players: player lookup, update and removal
- Auth: bearer token issuance for the club admin
- Reports: roster exports (CSV/Excel/PDF)

Routers are included from sprocket_api.api.main (under the /api/v1 prefix).
"""
