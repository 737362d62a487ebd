"""Discord integration for ToonScout.

ToonScout answers slash commands over Discord's HTTP interactions endpoint
rather than a gateway connection. Inbound interactions are verified with
the application's Ed25519 public key; outbound calls go through a thin
REST client authenticated with the bot token.
"""
