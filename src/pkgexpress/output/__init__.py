"""Terminal output: Rich console, display, and text formatters."""
