"""Runnable books fixture.

Run with:
    uvicorn main:app --reload

Available endpoints:
    GET /books/{isbn}  - Canned book, or 401 for ISBN 1680502395
"""

from books_fixture import ACTIVATION_NAME, FixtureConfig, create_app

app = create_app(FixtureConfig(name=ACTIVATION_NAME, title="Books Example"))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
