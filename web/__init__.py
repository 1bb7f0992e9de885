"""
Web application package for the tic-tac-toe engine.

Provides a FastAPI-based JSON API over a single shared GameEngine.
Served with uvicorn via the Procfile.
"""
