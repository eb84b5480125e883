"""Package metadata and naming constants."""

PACKAGE_NAME = "design-pattern-gallery"
PACKAGE_NAME_SHORT = "pattern-gallery"
__version__ = "1.0.0"
ENV_PREFIX = "PATTERN_GALLERY_"
