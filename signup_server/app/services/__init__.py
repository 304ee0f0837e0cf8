"""
Service layer for the Signup Server.

Services hold the work handlers delegate to, so that endpoint modules
stay thin.
"""
