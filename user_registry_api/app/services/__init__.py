"""
Service layer.

``user_store`` holds the records, ``user_service`` applies the rules
for listing, creating, replacing and deleting them.  API handlers
only talk to the service.
"""
