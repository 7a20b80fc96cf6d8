"""Top-level package for the receipt points API.

This package contains everything required to run the FastAPI backend
that scores retail receipts. A receipt is posted as JSON, the rule
engine turns it into an integer number of points and the result is
kept in an in-memory store under a freshly generated id so it can be
looked up later.

To run the API locally you can execute:

```bash
uvicorn receipt_points.api.main:app --reload
```

This will serve the FastAPI application on http://localhost:8000 and
automatically reload on code changes. Stored points live only as long
as the process does. You can override configuration values using
environment variables or a ``.env`` file at the project root.
"""

__all__: list[str] = []
