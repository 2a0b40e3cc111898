"""
env-example-gen — turn .env files into safe, committable .env.example templates.
"""

__version__ = "0.1.0"
