"""SVG input/output for the dash engine."""
