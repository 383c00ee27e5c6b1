"""
Catalog store clients: `real_http` talks to GitHub, `mocks` keeps data in memory.
"""
