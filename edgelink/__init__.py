"""Edge Linking.

Links the pixels of a thinned binary edge image into ordered chains:
- Raster scan for unvisited edge pixels
- Bidirectional tracking along 8-connected neighbours
- Minimum length filtering of the resulting chains
"""

__version__ = "0.1.0"
