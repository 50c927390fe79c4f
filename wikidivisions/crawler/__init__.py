"""HTTP access to the reference site."""
