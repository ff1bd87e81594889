"""PME 360 API package."""
