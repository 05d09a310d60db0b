"""FastAPI application exposing the Dialogflow webhook."""
