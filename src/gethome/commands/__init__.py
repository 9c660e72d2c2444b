"""Command-layer plumbing for the ``get-home`` entry point."""
