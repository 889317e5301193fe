# Services package init
"""
Bookstore Backend — Services Layer
=====================================

What:  Business logic layer sitting between routes (HTTP) and database (persistence).
How:   Services receive the request's AsyncSession, run their queries and
       raise application exceptions; they know nothing about HTTP.

Service Inventory:
    - BookService: catalog listing and lookup by title
    - PurchaseService: purchase recording and purchased-books listing
    - ReviewService: review submission and listing
    - UserService: registration, login, profile read/update
    - FileService: upload streaming and serving (one per app, owns a directory)
"""
