"""Hosts that embed the painter in other UI toolkits."""
