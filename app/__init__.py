"""Journal taxonomy application - models, repositories, services."""
