"""GitHub OAuth login and posts API."""
