# Routes package init
"""
Bookstore Backend — API Routes Package
=========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - health.py:     GET  /                     (plain-text greeting)
                     GET  /health               (service health check)
    - books.py:      GET  /books                (whole catalog)
                     GET  /api/book/{title}     (one book by title)
    - uploads.py:    POST /upload               (store an image)
                     GET  /uploads/{path}       (serve a stored image)
    - purchases.py:  POST /purchase             (buy a book)
                     GET  /purchased-books      (caller's books)
    - users.py:      POST /register, POST /login, GET /user, PUT /user
    - reviews.py:    POST /reviews, GET /reviews/{bookId}

Design Principle:
    Routes are THIN — they extract headers, path parameters and bodies,
    call a service, and return its result. Status codes for failures come
    from the exceptions the services raise (see main.py handlers).
"""
