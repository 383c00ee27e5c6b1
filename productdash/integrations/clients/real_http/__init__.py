"""
Real HTTP integration clients.

`GitHubContentsClient` stores the catalog as one JSON file in a GitHub
repository through the contents API.

Important:
- Must implement the same `CatalogStore` interface as the mock clients
- Must return data shaped according to productdash/integrations/contracts/*

Switching:
The selection of mock vs real clients should happen in productdash/api/main.py only.
"""

from .github_contents import GitHubContentsClient

__all__ = ["GitHubContentsClient"]
