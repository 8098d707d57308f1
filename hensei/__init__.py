"""Audio descriptor labelling and tone-series preprocessing for chord and phrase mining."""

__version__ = "1.0.0"