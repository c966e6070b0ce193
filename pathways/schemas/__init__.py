"""Pydantic models shared by the engine, the validators and the API."""
