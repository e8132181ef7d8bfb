"""Entry point for running topology-schema as a module: python -m topology_schema."""

from topology_schema.cli import main

if __name__ == "__main__":
    main()
