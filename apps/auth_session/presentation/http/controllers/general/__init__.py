"""General Controllers."""
