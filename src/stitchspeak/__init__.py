"""stitchspeak: baseline-aware stitch charts from JSON pixel-font alphabets."""
