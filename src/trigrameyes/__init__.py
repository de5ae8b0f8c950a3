"""trigrameyes -- Recover trigram-eye messages from screenshots.

This package locates stylized "eye" icons in a raster image, reads the
gaze direction of every eye, reassembles the eyes into a grid of
trigrams, and reduces each trigram to a canonical congruence-class index
using the triangle its three eyes form.
"""

__version__ = "0.1.0"
