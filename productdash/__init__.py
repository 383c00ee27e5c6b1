"""
ProductDash catalog API: a product catalog stored as one JSON file in a GitHub repository.
"""

__version__ = "1.0.0"
