"""
Domain layer - entities and value objects for the marketplace
"""
