"""HTTP layer of the TaskForge service."""
