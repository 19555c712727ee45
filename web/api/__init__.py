"""Web API - view functions returning response schemas."""
