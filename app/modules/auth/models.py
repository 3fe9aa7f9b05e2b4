# MongoDB collection: user (name configurable via USERS_COLLECTION)
# This file documents the expected document shape
# Actual operations are handled via the async pymongo client in service.py

"""
Expected document structure:
- _id: ObjectId (assigned by the store)
- name: string (nullable)
- email: string (case-sensitive, unique index "email_unique")
- password: string (bcrypt hash, never the plaintext)
"""
