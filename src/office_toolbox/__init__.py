"""Sideload, list, remove and validate Office add-in manifests."""
