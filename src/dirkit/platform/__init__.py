"""Platform adapters: logging setup and native filesystem access."""
