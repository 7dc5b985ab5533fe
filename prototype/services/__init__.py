"""Services package: logic that does not touch HTTP objects.

Files:
  redirect.py  — redirect target rewriting (used by middleware/redirects.py)

Rule: no FastAPI or Starlette imports in services.
"""
