"""
Greeting Service package.

Provides:
- A deterministic greeting pipeline (prefix, language lookup, username,
  suffix, case, truncation, timestamp)
- HTTP serving via FastAPI + uvicorn
"""
