"""checkmore command line interface."""
