"""
HTTP layer: FastAPI app factory (`main`) and the /api/products router.
"""
