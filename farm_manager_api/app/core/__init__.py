"""Configuration, logging, error types and the hosted records client."""
