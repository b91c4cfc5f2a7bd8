"""
DormDash core - pure marketplace logic for carts, listings, accounts and deliveries
"""

__version__ = "1.0.0"
