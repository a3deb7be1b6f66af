"""Settings for the command line tools."""
