"""
Bookstore Backend — Pydantic Request/Response Schemas
=======================================================

Schemas are separate from the SQLAlchemy models: they define the JSON
contract with the mobile client (camelCase field names) and never expose
internal columns such as password hashes.
"""
