"""Analysis pipeline and upstream services."""
