"""User access service: access kinds and the grants that give them to users."""
