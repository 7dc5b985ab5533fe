"""Routers package — HTTP endpoint definitions.

Files:
  questions.py  — Question page routes, included verbatim in every version app

Rule: routers never build version-specific URLs. Redirect through the
      injected Redirector and let middleware/redirects.py add the prefix.
"""
