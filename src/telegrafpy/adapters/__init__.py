"""Adapters: transports, client and logging integration."""
