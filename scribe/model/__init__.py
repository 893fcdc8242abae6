"""Request, response, parameter, token, and configuration models."""
