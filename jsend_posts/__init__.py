"""Example FastAPI service that answers every request with a JSend envelope."""
