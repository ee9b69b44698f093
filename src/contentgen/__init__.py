"""AI content generator: copy, images, code and narrated slideshows."""

__version__ = "0.1.0"
