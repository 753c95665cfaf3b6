"""Voxel world core: chunks, region-file saves, settings, screens, sky, weather, input and texture atlases."""

__version__ = "0.1.0"