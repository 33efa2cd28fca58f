"""HTTP surface for Master Gate (FastAPI)."""
