"""HTTP routers for the posts service."""
