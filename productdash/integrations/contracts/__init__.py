"""
Contracts (data models).

Shapes shared by the real GitHub store client, the in-memory store and the
API layer. Both store clients implement `CatalogStore` and return a
`CatalogSnapshot`, so the catalog service never sees transport details.
"""
