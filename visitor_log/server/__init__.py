"""HTTP server for the visitor log (FastAPI)."""
