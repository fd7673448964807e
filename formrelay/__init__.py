"""Form Relay: relays web form submissions to an inbox over SMTP."""

__version__ = "1.0.0"
