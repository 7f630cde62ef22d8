"""HTTP surface for the Age of Wars solver."""
