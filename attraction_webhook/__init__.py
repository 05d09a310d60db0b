"""Dialogflow fulfillment webhook for the touriste attractions backend."""

__version__ = "0.1.0"
