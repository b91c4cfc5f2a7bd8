"""
Infrastructure layer - configuration-independent plumbing shared by the services
"""
