"""GUI utilities: icons and log forwarding."""
