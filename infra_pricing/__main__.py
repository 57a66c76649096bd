"""
Main entry point for the infrastructure pricing engine.
This allows running the package with: python -m infra_pricing
"""

from .console import main_sync

if __name__ == "__main__":
    main_sync()
