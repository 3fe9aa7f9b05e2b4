# MongoDB collection: ourRecentlyWorks (name configurable via RECENT_WORKS_COLLECTION)
# Read-only through the API; populated by app/scripts/seed_collections.py

"""
Expected document structure (open field bag):
- _id: ObjectId
- any caller-defined keys
"""
