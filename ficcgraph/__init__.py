"""
ficcgraph: observable curves and calibrated models.

Market quotes, curves and models form a notification graph: changing a quote,
relinking a handle or moving the evaluation date reaches every curve and
model derived from it, which recompute on their next read.
"""

__version__ = "0.1.0"
