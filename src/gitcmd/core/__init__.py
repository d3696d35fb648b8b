"""Option resolution, argument building, process execution and output parsing."""
