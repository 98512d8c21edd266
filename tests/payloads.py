"""Expected response bodies shared across tests."""

ERROR_BODY = {
    "status": 401,
    "error": "Unauthorized",
    "message": "No message available",
    "path": "/books/1680502395",
}

BOOK_BODY = {"isbn": "1491950358", "name": "Building Microservices"}
