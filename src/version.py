"""Service version that is read by project manager tools."""

# this should be the only version value used in all source codes!!!
__version__ = "0.1.0"
