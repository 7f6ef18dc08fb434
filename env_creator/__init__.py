"""Create a .env file from a template such as .env.example."""

__version__ = "0.1.0"
