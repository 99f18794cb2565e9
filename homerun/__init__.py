"""Two-player road-crossing race: game server, network client, packet format and world model."""

__version__ = "0.1.0"