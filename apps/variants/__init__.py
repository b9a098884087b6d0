"""Image Variants Origin Service."""
