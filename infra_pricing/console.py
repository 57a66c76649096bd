"""
Console script entry point for the infrastructure pricing engine.
"""
import sys


def main_sync():
    """Run the CLI and exit with its status code"""
    try:
        from infra_pricing.cli import main
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nOperation cancelled by user", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main_sync()
