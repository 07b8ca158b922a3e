"""Unit model, formatting rules and the scalar/compound conversion engines."""
