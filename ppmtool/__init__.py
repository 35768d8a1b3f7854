"""Read binary PPM (P6) images, change their level, resize, colour-reduce and write CPPM."""

__version__ = "0.1.0"