# MongoDB collection: reliefgoods (name configurable via RELIEF_GOODS_COLLECTION)
# This file documents the expected document shape
# Actual operations are handled via the async pymongo client in service.py

"""
Expected document structure (open field bag, nothing enforced):
- _id: ObjectId (assigned by the store on insert, or taken from the path on upsert)
- title, category, item, reason, amount, description, priority: caller-supplied
- any other caller-supplied keys
"""

# Fields replaced by PUT /relief-goods/{id}; anything else on the record is left alone
UPSERT_FIELDS = (
    "title",
    "category",
    "item",
    "reason",
    "amount",
    "description",
    "priority",
)
