"""Adapters: HTTP transport and upstream GraphQL documents."""
