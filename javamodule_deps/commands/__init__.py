"""CLI commands for javamodule-deps."""
