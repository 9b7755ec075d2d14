"""
Entry point for the parametric insurance protocol service.
Run with: uvicorn main:app --reload
"""
from app.main import app

__all__ = ["app"]
