"""List desktop applications for menu-driven launchers."""
