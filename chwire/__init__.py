"""Helpers for ClickHouse native-protocol clients: query settings, keyword matching, value types, results and a TLS config registry."""

__version__ = "0.1.0"
__all__ = ["query_settings", "result", "tls_config", "types", "word_matcher"]