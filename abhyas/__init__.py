"""Abhyas - a personal practice worklist of links."""
