"""HTTP surface for the clothing swap service."""
